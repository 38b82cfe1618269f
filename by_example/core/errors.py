"""Base exception class for all by-example-specific errors."""


class ByExampleError(Exception):
    """Base class for all by-example errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
