"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, version: str, total_suites: int) -> None: ...

    def config_env_default_used(self, var_name: str) -> None: ...
