"""Observer port for the runner — defines run events in domain language."""

from typing import Protocol


class RunObserver(Protocol):
    """Observer port emitting structured events while examples execute.

    Implementations may log to structlog, draw progress, or record for tests.
    """

    def run_started(self, run_id: str, total_examples: int) -> None: ...

    def run_completed(
        self,
        run_id: str,
        total: int,
        passed: int,
        failed: int,
        errored: int,
        elapsed_seconds: float,
    ) -> None: ...

    def example_started(self, run_id: str, identifier: str, description: str) -> None: ...

    def example_passed(self, run_id: str, identifier: str, description: str) -> None: ...

    def example_failed(
        self,
        run_id: str,
        identifier: str,
        description: str,
        actual: str,
        expected: str,
    ) -> None: ...

    def example_errored(
        self,
        run_id: str,
        identifier: str,
        description: str,
        error_type: str,
        reason: str,
    ) -> None: ...
