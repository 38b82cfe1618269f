"""RunnerConfig — the root configuration object for a by-example run."""

from pydantic import BaseModel, Field

# package.module or package.module:attribute
_TARGET_PATTERN = r"^[A-Za-z_][\w.]*(:[A-Za-z_]\w*)?$"


class SuiteConfig(BaseModel, frozen=True):
    target: str = Field(pattern=_TARGET_PATTERN)


class ReportConfig(BaseModel, frozen=True):
    show_passing: bool = False
    max_repr_length: int = Field(ge=8, default=200)


class RunnerConfig(BaseModel, frozen=True):
    """Root configuration aggregate: which suites to run and how to report them."""

    name: str = Field(min_length=1)
    version: str = Field(min_length=1, default="1")
    suites: list[SuiteConfig] = Field(default_factory=list)
    report: ReportConfig = Field(default_factory=ReportConfig)
