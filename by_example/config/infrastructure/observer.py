"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, version: str, total_suites: int) -> None:
        self._log.info(
            "config.loaded", name=name, version=version, total_suites=total_suites
        )

    def config_env_default_used(self, var_name: str) -> None:
        self._log.warning(
            "config.env_default_used",
            var_name=var_name,
            message="Environment variable unset; using the default from the config",
        )
