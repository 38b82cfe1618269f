"""Observer port for suite loading — defines events in domain language."""

from typing import Protocol


class SuiteObserver(Protocol):
    def suite_loaded(self, target: str, total_examples: int) -> None: ...

    def suite_duplicate_target_skipped(self, target: str) -> None: ...
