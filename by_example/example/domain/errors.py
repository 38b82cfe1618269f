"""Error types raised while building or checking an Example."""

from by_example.core.errors import ByExampleError


class TypeMismatchError(ByExampleError):
    """Raised when the produced and expected sides have incompatible types.

    At run time the rendered values are attached as ``actual`` and
    ``expected``; at construction only the annotated types are known.
    """

    def __init__(
        self,
        produced_type: type,
        expected_type: type,
        actual: str | None = None,
        expected: str | None = None,
    ) -> None:
        self.produced_type = produced_type
        self.expected_type = expected_type
        self.actual = actual
        self.expected = expected
        super().__init__(
            "Failed to compare example results: produced type "
            f"{_type_name(produced_type)} is incompatible with expected type "
            f"{_type_name(expected_type)}"
        )


def _type_name(tp: type) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)
