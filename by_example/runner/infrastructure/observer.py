"""StructlogRunObserver — production observer that delegates to structlog."""

import structlog


class StructlogRunObserver:
    """Logs run domain events to structlog.

    Does NOT inherit from RunObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def run_started(self, run_id: str, total_examples: int) -> None:
        self._log.info("run.started", run_id=run_id, total_examples=total_examples)

    def run_completed(
        self,
        run_id: str,
        total: int,
        passed: int,
        failed: int,
        errored: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "run.completed",
            run_id=run_id,
            total=total,
            passed=passed,
            failed=failed,
            errored=errored,
            elapsed_seconds=round(elapsed_seconds, 3),
        )

    def example_started(self, run_id: str, identifier: str, description: str) -> None:
        self._log.debug(
            "run.example.started",
            run_id=run_id,
            identifier=identifier,
            description=description,
        )

    def example_passed(self, run_id: str, identifier: str, description: str) -> None:
        self._log.info(
            "run.example.passed",
            run_id=run_id,
            identifier=identifier,
            description=description,
        )

    def example_failed(
        self,
        run_id: str,
        identifier: str,
        description: str,
        actual: str,
        expected: str,
    ) -> None:
        self._log.error(
            "run.example.failed",
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
        self._log.error(
            "run.example.errored",
            run_id=run_id,
            identifier=identifier,
            description=description,
            error_type=error_type,
            reason=reason,
        )
