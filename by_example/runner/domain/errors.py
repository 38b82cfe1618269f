"""Per-example failure types raised by verify() and captured by the runner."""

from by_example.core.errors import ByExampleError


class ExampleRaisedError(ByExampleError):
    """Raised when the code under test, or its expected side, raises."""

    def __init__(self, identifier: str, description: str, error: BaseException) -> None:
        self.identifier = identifier
        self.description = description
        self.error = error
        super().__init__(
            f"Failed to run example {identifier} ('{description}'): "
            f"{type(error).__name__}: {error}"
        )


class ExampleAssertionError(ByExampleError):
    """Raised when the produced value is not equal to the expected value.

    ``actual`` and ``expected`` hold the rendered values.
    """

    def __init__(
        self, identifier: str, description: str, actual: str, expected: str
    ) -> None:
        self.identifier = identifier
        self.description = description
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Failed to match example {identifier} ('{description}'): "
            f"expected {expected}, got {actual}"
        )
