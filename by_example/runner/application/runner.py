"""ExampleRunner — executes every registered example and builds a RunReport."""

import time
import uuid

from by_example.example.domain.errors import TypeMismatchError
from by_example.registry.domain.registry import RegisteredExample, Registry
from by_example.runner.application.verify import DEFAULT_MAX_REPR_LENGTH, verify
from by_example.runner.domain.errors import ExampleAssertionError, ExampleRaisedError
from by_example.runner.domain.observer import RunObserver
from by_example.runner.domain.outcome import ExampleOutcome, OutcomeStatus
from by_example.runner.domain.report import RunReport


class ExampleRunner:
    """Runs a registry's examples sequentially, in registration order.

    Every per-example failure is converted into an ExampleOutcome; one failing
    or raising example never prevents the next one from running. Examples are
    deterministic by contract, so nothing is retried.
    """

    def __init__(
        self,
        observer: RunObserver,
        max_repr_length: int = DEFAULT_MAX_REPR_LENGTH,
    ) -> None:
        self._observer = observer
        self._max_repr_length = max_repr_length

    def run(self, registry: Registry) -> RunReport:
        """Execute each example once and return the RunReport."""
        run_id = str(uuid.uuid4())
        entries = registry.entries

        self._observer.run_started(run_id=run_id, total_examples=len(entries))
        started_at = time.monotonic()

        outcomes: list[ExampleOutcome] = []
        try:
            for entry in entries:
                outcomes.append(self._run_one(run_id=run_id, entry=entry))
        finally:
            # Also reached on KeyboardInterrupt, so observers can tear down.
            report = RunReport(
                run_id=run_id,
                outcomes=outcomes,
                elapsed_seconds=time.monotonic() - started_at,
            )
            self._observer.run_completed(
                run_id=run_id,
                total=report.total,
                passed=report.passed,
                failed=report.failed,
                errored=report.errored,
                elapsed_seconds=report.elapsed_seconds,
            )
        return report

    def _run_one(self, run_id: str, entry: RegisteredExample) -> ExampleOutcome:
        self._observer.example_started(
            run_id=run_id,
            identifier=entry.identifier,
            description=entry.description,
        )
        started_at = time.monotonic()
        try:
            verify(entry=entry, max_repr_length=self._max_repr_length)
        except ExampleAssertionError as exc:
            self._observer.example_failed(
                run_id=run_id,
                identifier=entry.identifier,
                description=entry.description,
                actual=exc.actual,
                expected=exc.expected,
            )
            return ExampleOutcome(
                identifier=entry.identifier,
                description=entry.description,
                status=OutcomeStatus.FAILED,
                actual=exc.actual,
                expected=exc.expected,
                elapsed_seconds=time.monotonic() - started_at,
            )
        except ExampleRaisedError as exc:
            return self._errored(
                run_id=run_id,
                entry=entry,
                error_type=type(exc.error).__name__,
                reason=str(exc.error),
                started_at=started_at,
            )
        except TypeMismatchError as exc:
            return self._errored(
                run_id=run_id,
                entry=entry,
                error_type=type(exc).__name__,
                reason=str(exc),
                started_at=started_at,
                actual=exc.actual,
                expected=exc.expected,
            )

        self._observer.example_passed(
            run_id=run_id,
            identifier=entry.identifier,
            description=entry.description,
        )
        return ExampleOutcome(
            identifier=entry.identifier,
            description=entry.description,
            status=OutcomeStatus.PASSED,
            elapsed_seconds=time.monotonic() - started_at,
        )

    def _errored(
        self,
        run_id: str,
        entry: RegisteredExample,
        error_type: str,
        reason: str,
        started_at: float,
        actual: str | None = None,
        expected: str | None = None,
    ) -> ExampleOutcome:
        self._observer.example_errored(
            run_id=run_id,
            identifier=entry.identifier,
            description=entry.description,
            error_type=error_type,
            reason=reason,
        )
        return ExampleOutcome(
            identifier=entry.identifier,
            description=entry.description,
            status=OutcomeStatus.ERRORED,
            actual=actual,
            expected=expected,
            error_type=error_type,
            error=reason,
            elapsed_seconds=time.monotonic() - started_at,
        )


class _SilentRunObserver:
    """Discards every event; used when run_all is called without an observer."""

    def run_started(self, run_id: str, total_examples: int) -> None:
        pass

    def run_completed(
        self,
        run_id: str,
        total: int,
        passed: int,
        failed: int,
        errored: int,
        elapsed_seconds: float,
    ) -> None:
        pass

    def example_started(self, run_id: str, identifier: str, description: str) -> None:
        pass

    def example_passed(self, run_id: str, identifier: str, description: str) -> None:
        pass

    def example_failed(
        self,
        run_id: str,
        identifier: str,
        description: str,
        actual: str,
        expected: str,
    ) -> None:
        pass

    def example_errored(
        self,
        run_id: str,
        identifier: str,
        description: str,
        error_type: str,
        reason: str,
    ) -> None:
        pass


def run_all(
    registry: Registry,
    observer: RunObserver | None = None,
    max_repr_length: int = DEFAULT_MAX_REPR_LENGTH,
) -> RunReport:
    """Run every example in ``registry``; without an observer nothing is emitted."""
    runner = ExampleRunner(
        observer=observer if observer is not None else _SilentRunObserver(),
        max_repr_length=max_repr_length,
    )
    return runner.run(registry)
