"""Type compatibility rules shared by construction-time and run-time checks."""

import numbers
import typing
from collections.abc import Callable
from typing import Any

from by_example.example.domain.errors import TypeMismatchError


def types_compatible(produced: type, expected: type) -> bool:
    """Return True when values of the two types may sensibly be compared with ==.

    Two types are compatible when either is a subclass of the other, when both
    are numeric (``1 == 1.0`` is a meaningful comparison), or when either side
    is ``NoneType`` (an Optional result compared against ``None``).
    """
    if produced is expected:
        return True
    if produced is type(None) or expected is type(None):
        return True
    if issubclass(produced, expected) or issubclass(expected, produced):
        return True
    return issubclass(produced, numbers.Number) and issubclass(
        expected, numbers.Number
    )


def check_annotations(produce: Callable[[], Any], expect: Callable[[], Any]) -> None:
    """Raise TypeMismatchError if both callables annotate incompatible return types.

    Callables without a usable return annotation (lambdas, generics, unions)
    are skipped: the check then happens on the values at run time.
    """
    produced = _return_type(produce)
    expected = _return_type(expect)
    if produced is None or expected is None:
        return
    if not types_compatible(produced, expected):
        raise TypeMismatchError(produced_type=produced, expected_type=expected)


def _return_type(fn: Callable[[], Any]) -> type | None:
    try:
        hints = typing.get_type_hints(fn)
    except (AttributeError, NameError, TypeError):
        return None
    annotation = hints.get("return")
    if annotation is None:
        return None
    # Only plain classes take part; Optional[int], list[int] etc. are left to run time.
    if isinstance(annotation, type) and typing.get_origin(annotation) is None:
        return annotation
    return None
