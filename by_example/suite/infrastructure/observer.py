"""Structlog implementation of the SuiteObserver port."""

import structlog


class StructlogSuiteObserver:
    """Delegates suite loading events to structlog.

    Satisfies the SuiteObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def suite_loaded(self, target: str, total_examples: int) -> None:
        self._log.info("suite.loaded", target=target, total_examples=total_examples)

    def suite_duplicate_target_skipped(self, target: str) -> None:
        self._log.warning("suite.duplicate_target_skipped", target=target)
