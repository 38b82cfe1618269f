"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from by_example.config.domain.config import RunnerConfig
from by_example.config.domain.observer import ConfigObserver
from by_example.config.infrastructure.env_interpolation import (
    collect_defaulted_vars,
    collect_missing_vars,
    interpolate,
)
from by_example.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a RunnerConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> RunnerConfig:
        """
        Load, interpolate, validate, and return a RunnerConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing, unreadable, or not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} without a default is unset
                (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        for var_name in collect_defaulted_vars(raw):
            self._observer.config_env_default_used(var_name=var_name)
        cfg = _build_config(resolved=interpolate(raw))
        self._observer.config_loaded(
            name=cfg.name, version=cfg.version, total_suites=len(cfg.suites)
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=f"cannot read file ({exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc
    if not isinstance(raw, dict):
        raise ConfigValidationError(f"top level of {path} must be a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> RunnerConfig:
    try:
        return RunnerConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
