"""verify — execute a single registered example, raising on any failure."""

from typing import Any

from by_example.example.domain.compatibility import types_compatible
from by_example.example.domain.errors import TypeMismatchError
from by_example.registry.domain.registry import RegisteredExample
from by_example.runner.domain.errors import ExampleAssertionError, ExampleRaisedError

DEFAULT_MAX_REPR_LENGTH = 200
_ELLIPSIS = "..."


def render_value(value: object, max_length: int = DEFAULT_MAX_REPR_LENGTH) -> str:
    """Return repr(value), cut to max_length characters with a trailing '...'."""
    try:
        text = repr(value)
    except Exception as exc:  # noqa: BLE001
        text = f"<unrepresentable {type(value).__name__}: {type(exc).__name__}>"
    if len(text) <= max_length:
        return text
    return text[: max(max_length - len(_ELLIPSIS), 0)] + _ELLIPSIS


def verify(
    entry: RegisteredExample, max_repr_length: int = DEFAULT_MAX_REPR_LENGTH
) -> Any:
    """Run ``entry``'s example once and return the produced value if it matches.

    Usable directly from any test harness, e.g. parametrizing a pytest test
    over a registry with ``ids=`` taken from each entry's identifier.

    Raises:
        ExampleRaisedError: if produce() or expect() raised; the original
            exception is chained and available as ``.error``.
        TypeMismatchError: if the values are not equal and their runtime types
            are incompatible; carries both rendered values.
        ExampleAssertionError: if the values are not equal.
    """
    actual = _invoke(entry=entry, side="produce")
    expected = _invoke(entry=entry, side="expect")
    if _equal(entry=entry, actual=actual, expected=expected):
        return actual

    rendered_actual = render_value(actual, max_repr_length)
    rendered_expected = render_value(expected, max_repr_length)
    # Types only matter once == has said no; equal values always pass.
    if not types_compatible(type(actual), type(expected)):
        raise TypeMismatchError(
            produced_type=type(actual),
            expected_type=type(expected),
            actual=rendered_actual,
            expected=rendered_expected,
        )
    raise ExampleAssertionError(
        identifier=entry.identifier,
        description=entry.description,
        actual=rendered_actual,
        expected=rendered_expected,
    )


def _invoke(entry: RegisteredExample, side: str) -> Any:
    fn = getattr(entry.example, side)
    try:
        return fn()
    except Exception as exc:
        raise ExampleRaisedError(
            identifier=entry.identifier, description=entry.description, error=exc
        ) from exc


def _equal(entry: RegisteredExample, actual: object, expected: object) -> bool:
    # A custom __eq__ may raise, or return a value whose truth test raises.
    try:
        return bool(actual == expected)
    except Exception as exc:
        raise ExampleRaisedError(
            identifier=entry.identifier, description=entry.description, error=exc
        ) from exc
