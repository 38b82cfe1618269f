"""Summary rendering — turns a RunReport into the lines printed after a run."""

from collections.abc import Callable
from typing import TypeAlias

from by_example.runner.domain.outcome import ExampleOutcome, OutcomeStatus
from by_example.runner.domain.report import RunReport

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"

_RULE_WIDTH = 72

Painter: TypeAlias = Callable[[str, str], str]


def format_elapsed(elapsed_seconds: float) -> str:
    """Format elapsed seconds as '1m 23.4s' or '0.012s'."""
    minutes, seconds = divmod(elapsed_seconds, 60)
    if minutes >= 1:
        return f"{int(minutes)}m {seconds:.1f}s"
    return f"{elapsed_seconds:.3f}s"


def summary_line(report: RunReport) -> str:
    """The one-line verdict, e.g. 'Ran 12 examples in 0.004s with 1 failure'."""
    noun = "example" if report.total == 1 else "examples"
    failures = "failure" if report.failure_count == 1 else "failures"
    return (
        f"Ran {report.total} {noun} in {format_elapsed(report.elapsed_seconds)} "
        f"with {report.failure_count} {failures}"
    )


def render_summary(
    report: RunReport,
    show_passing: bool = False,
    color: bool = False,
) -> list[str]:
    """Return the summary as lines, without trailing newlines.

    Each non-passing example gets a headline naming its identifier and
    description, followed by an indented detail line. Passing examples are
    listed only when ``show_passing`` is set.
    """
    paint = _painter(color)
    lines: list[str] = ["", paint(_DIM, "─" * _RULE_WIDTH)]
    lines.append(paint(_CYAN + _BOLD, f"  by-example  ·  run {report.run_id[:8]}"))
    lines.append(paint(_DIM, "─" * _RULE_WIDTH))

    for outcome in report.outcomes:
        if outcome.passed:
            if show_passing:
                lines.append(
                    paint(_GREEN, "  ✓ ")
                    + f"{outcome.identifier}  {paint(_DIM, outcome.description)}"
                )
            continue
        lines.extend(_failure_lines(outcome=outcome, paint=paint))

    verdict_color = _GREEN if report.succeeded else _RED
    lines.append("")
    lines.append(paint(verdict_color + _BOLD, f"  {summary_line(report)}"))
    lines.append(
        paint(
            _DIM,
            f"  passed {report.passed}  ·  failed {report.failed}"
            f"  ·  errored {report.errored}",
        )
    )
    lines.append("")
    return lines


def _failure_lines(outcome: ExampleOutcome, paint: Painter) -> list[str]:
    if outcome.status is OutcomeStatus.FAILED:
        return [
            paint(_RED + _BOLD, "  ✗ FAILED  ")
            + f"{outcome.identifier}: {outcome.description}",
            f"      expected {outcome.expected}, got {outcome.actual}",
        ]
    lines = [
        paint(_YELLOW + _BOLD, "  ✗ ERROR   ")
        + f"{outcome.identifier}: {outcome.description}",
        f"      {outcome.error_type}: {outcome.error}",
    ]
    if outcome.actual is not None and outcome.expected is not None:
        lines.append(f"      expected {outcome.expected}, got {outcome.actual}")
    return lines


def _painter(color: bool) -> Painter:
    def paint(style: str, text: str) -> str:
        if not color:
            return text
        return f"{style}{text}{_RESET}"

    return paint
