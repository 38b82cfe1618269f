"""RunReport — the aggregate result of running every example in a registry."""

from pydantic import BaseModel, Field, computed_field

from by_example.runner.domain.outcome import ExampleOutcome, OutcomeStatus


class RunReport(BaseModel, frozen=True):
    """Immutable summary returned when a run completes.

    Outcomes are stored in registration order. Counts are derived from them so
    they can never disagree with the detail entries.
    """

    run_id: str = Field(min_length=1)
    outcomes: list[ExampleOutcome]
    elapsed_seconds: float = Field(ge=0.0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.outcomes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> int:
        return self._count(OutcomeStatus.PASSED)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def errored(self) -> int:
        return self._count(OutcomeStatus.ERRORED)

    @property
    def failure_count(self) -> int:
        """Value mismatches plus errors: every example that did not pass."""
        return self.failed + self.errored

    @property
    def failures(self) -> list[ExampleOutcome]:
        return [o for o in self.outcomes if not o.passed]

    @property
    def succeeded(self) -> bool:
        return self.failure_count == 0

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)
