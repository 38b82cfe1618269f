"""Example — one documented (code under test, expected result) pair."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from by_example.example.domain.compatibility import check_annotations

T = TypeVar("T")


@dataclass(frozen=True)
class Example(Generic[T]):
    """Immutable pair of zero-argument computations compared with ==.

    Both callables must be safe to invoke more than once: a harness may run
    the same example several times in one process.
    """

    produce: Callable[[], T]
    expect: Callable[[], T]


class ExampleBuilder(Generic[T]):
    """Half-built example holding only the code under test.

    Not registrable on its own; call ``returns`` to obtain an Example.
    """

    def __init__(self, produce: Callable[[], T]) -> None:
        self._produce = produce

    @property
    def produce(self) -> Callable[[], T]:
        return self._produce

    def returns(self, expect: Callable[[], T]) -> Example[T]:
        """Complete the example with the computation of its expected result.

        Raises:
            TypeMismatchError: if both callables annotate incompatible return types.
        """
        check_annotations(produce=self._produce, expect=expect)
        return Example(produce=self._produce, expect=expect)


def this_code(produce: Callable[[], T]) -> ExampleBuilder[T]:
    """Start an example: ``this_code(lambda: 2 + 2).returns(lambda: 4)``."""
    return ExampleBuilder(produce)
