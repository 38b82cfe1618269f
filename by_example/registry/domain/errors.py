"""Error types raised by malformed or conflicting registration calls."""

from by_example.core.errors import ByExampleError
from by_example.example.domain.example import ExampleBuilder


class DuplicateIdentifierError(ByExampleError):
    """Raised when a derived identifier is already present in the registry."""

    def __init__(self, identifier: str, description: str) -> None:
        self.identifier = identifier
        self.description = description
        super().__init__(
            f"Failed to register example: identifier '{identifier}' derived from "
            f"'{description}' is already registered"
        )


class EmptyRegistrationError(ByExampleError):
    """Raised when a registration call supplies no examples."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(
            f"Failed to register examples: no examples given for '{description}'"
        )


class InvalidDescriptionError(ByExampleError):
    """Raised when the description is not a string or has no visible text."""

    def __init__(self, description: object) -> None:
        self.description = description
        super().__init__(
            f"Failed to register examples: invalid description {description!r}"
        )


class IncompleteExampleError(ByExampleError):
    """Raised when something other than a finished Example is registered.

    Typically an ExampleBuilder whose ``returns`` was never called.
    """

    def __init__(self, description: str, index: int, received: object) -> None:
        self.description = description
        self.index = index
        self.received = received
        hint = " (missing .returns(...))" if isinstance(received, ExampleBuilder) else ""
        super().__init__(
            f"Failed to register example {index} of '{description}': expected an "
            f"Example, got {type(received).__name__}{hint}"
        )

