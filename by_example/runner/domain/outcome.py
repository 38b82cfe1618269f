"""ExampleOutcome — the result of executing one registered example."""

from enum import StrEnum

from pydantic import BaseModel, Field


class OutcomeStatus(StrEnum):
    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"


class ExampleOutcome(BaseModel, frozen=True):
    """Immutable record of one example run.

    ``actual`` and ``expected`` are set (as rendered strings) for FAILED
    outcomes; ``error_type`` and ``error`` are set for ERRORED outcomes, which
    cover both exceptions raised by the code under test and runtime type
    mismatches between the two sides.
    """

    identifier: str = Field(min_length=1)
    description: str
    status: OutcomeStatus
    actual: str | None = None
    expected: str | None = None
    error_type: str | None = None
    error: str | None = None
    elapsed_seconds: float = Field(ge=0.0, default=0.0)

    @property
    def passed(self) -> bool:
        return self.status is OutcomeStatus.PASSED
