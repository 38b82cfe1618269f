"""CompositeRunObserver — fans out all events to a list of observers."""

from by_example.runner.domain.observer import RunObserver


class CompositeRunObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from RunObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[RunObserver]) -> None:
        self._observers = observers

    def run_started(self, run_id: str, total_examples: int) -> None:
        for obs in self._observers:
            obs.run_started(run_id=run_id, total_examples=total_examples)

    def run_completed(
        self,
        run_id: str,
        total: int,
        passed: int,
        failed: int,
        errored: int,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.run_completed(
                run_id=run_id,
                total=total,
                passed=passed,
                failed=failed,
                errored=errored,
                elapsed_seconds=elapsed_seconds,
            )

    def example_started(self, run_id: str, identifier: str, description: str) -> None:
        for obs in self._observers:
            obs.example_started(
                run_id=run_id, identifier=identifier, description=description
            )

    def example_passed(self, run_id: str, identifier: str, description: str) -> None:
        for obs in self._observers:
            obs.example_passed(
                run_id=run_id, identifier=identifier, description=description
            )

    def example_failed(
        self,
        run_id: str,
        identifier: str,
        description: str,
        actual: str,
        expected: str,
    ) -> None:
        for obs in self._observers:
            obs.example_failed(
                run_id=run_id,
                identifier=identifier,
                description=description,
                actual=actual,
                expected=expected,
            )

    def example_errored(
        self,
        run_id: str,
        identifier: str,
        description: str,
        error_type: str,
        reason: str,
    ) -> None:
        for obs in self._observers:
            obs.example_errored(
                run_id=run_id,
                identifier=identifier,
                description=description,
                error_type=error_type,
                reason=reason,
            )
