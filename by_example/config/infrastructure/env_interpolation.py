"""Recursive ${ENV_VAR} and ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re
from typing import TypeAlias

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset and has no default.

    The whole tree is walked before returning so all problems surface at once.
    """
    missing: list[str] = []
    for var_name, default in _references(data):
        if default is None and var_name not in os.environ and var_name not in missing:
            missing.append(var_name)
    return missing


def collect_defaulted_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset and falls back to its default."""
    defaulted: list[str] = []
    for var_name, default in _references(data):
        if default is not None and var_name not in os.environ:
            if var_name not in defaulted:
                defaulted.append(var_name)
    return defaulted


def _references(data: RawValue) -> list[tuple[str, str | None]]:
    if isinstance(data, str):
        return [(m.group(1), m.group(2)) for m in _ENV_VAR_PATTERN.finditer(data)]
    if isinstance(data, list):
        return [ref for item in data for ref in _references(item)]
    if isinstance(data, dict):
        return [ref for value in data.values() for ref in _references(value)]
    return []


def interpolate(data: RawValue) -> RawValue:
    """Recursively substitute every ${ENV_VAR} reference.

    Call ``collect_missing_vars`` first: an unset variable without a default
    raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _substitute(match: re.Match[str]) -> str:
    var_name, default = match.group(1), match.group(2)
    if default is None:
        return os.environ[var_name]
    return os.environ.get(var_name, default)
