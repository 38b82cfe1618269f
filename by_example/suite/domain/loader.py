"""SuiteLoader Protocol — structural interface for resolving suite targets."""

from typing import Protocol

from by_example.registry.domain.registry import Registry


class SuiteLoader(Protocol):
    """Resolves ``module:attribute`` targets into one combined Registry."""

    def load(self, targets: list[str]) -> Registry: ...
