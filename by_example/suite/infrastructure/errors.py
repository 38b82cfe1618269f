"""Error types raised by suite infrastructure."""

from by_example.core.errors import ByExampleError


class SuiteLoadError(ByExampleError):
    """Raised when a suite target cannot be imported or is not a Registry."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        super().__init__(f"Failed to load suite '{target}': {reason}")
