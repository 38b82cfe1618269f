"""ProgressRunObserver — renders a Rich progress bar for a run to stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text


class _OutcomeBarColumn(ProgressColumn):
    """ProgressColumn that renders three segments: passed, not passed, remaining."""

    def __init__(self, bar_width: int = 40) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        bar_width = self.bar_width or 40
        total = task.total or 0
        if total > 0:
            passed_cells = int(task.fields.get("passed", 0) / total * bar_width)
            # Failures fill from where passes end; capped at the bar width.
            failed_cells = min(
                int(task.fields.get("not_passed", 0) / total * bar_width),
                bar_width - passed_cells,
            )
        else:
            passed_cells = 0
            failed_cells = 0
        remaining_cells = bar_width - passed_cells - failed_cells

        result = Text()
        result.append("█" * passed_cells, style="bright_green")
        result.append("█" * failed_cells, style="bright_red")
        result.append("░" * remaining_cells, style="dim white")
        return result


class ProgressRunObserver:
    """Renders one progress bar covering every example in the run.

    Passed examples fill the bar in green, failed or errored ones in red.
    Counters are kept even when ``disabled=True``, which suppresses all
    terminal output (useful in tests).

    Does NOT inherit from RunObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False, console: Console | None = None) -> None:
        self._disabled = disabled
        self._console = console
        self._passed = 0
        self._not_passed = 0
        self._total = 0
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    @property
    def passed(self) -> int:
        return self._passed

    @property
    def not_passed(self) -> int:
        return self._not_passed

    @property
    def total(self) -> int:
        return self._total

    def _advance(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=self._passed + self._not_passed,
            passed=self._passed,
            not_passed=self._not_passed,
        )

    def run_started(self, run_id: str, total_examples: int) -> None:
        self._passed = 0
        self._not_passed = 0
        self._total = total_examples
        self._progress = None
        self._task_id = None

        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("examples"),
            _OutcomeBarColumn(bar_width=40),
            TextColumn("{task.completed:.0f}/{task.total:.0f}"),
            TextColumn("[bright_red]{task.fields[not_passed]} failed"),
            TimeElapsedColumn(),
            console=self._console or Console(stderr=True),
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description="examples",
            total=float(total_examples),
            passed=0,
            not_passed=0,
        )
        self._progress.start()

    def run_completed(
        self,
        run_id: str,
        total: int,
        passed: int,
        failed: int,
        errored: int,
        elapsed_seconds: float,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def example_started(self, run_id: str, identifier: str, description: str) -> None:
        pass

    def example_passed(self, run_id: str, identifier: str, description: str) -> None:
        self._passed += 1
        self._advance()

    def example_failed(
        self,
        run_id: str,
        identifier: str,
        description: str,
        actual: str,
        expected: str,
    ) -> None:
        self._not_passed += 1
        self._advance()

    def example_errored(
        self,
        run_id: str,
        identifier: str,
        description: str,
        error_type: str,
        reason: str,
    ) -> None:
        self._not_passed += 1
        self._advance()
