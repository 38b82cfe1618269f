"""Registry — the ordered, explicitly owned collection of registered examples."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from by_example.example.domain.example import Example
from by_example.registry.domain.errors import (
    DuplicateIdentifierError,
    EmptyRegistrationError,
    IncompleteExampleError,
    InvalidDescriptionError,
)
from by_example.registry.domain.identifier import derive_identifier

Identifier: TypeAlias = str


@dataclass(frozen=True)
class RegisteredExample:
    """One example as stored in a registry, with its derived identifier.

    ``index`` is the example's zero-based position within the batch it was
    registered with.
    """

    identifier: Identifier
    description: str
    index: int
    example: Example[Any]


class Registry:
    """Ordered collection of examples keyed by derived identifier.

    Insertion order is execution and reporting order. Registries are plain
    objects: create one per suite and pass it around, there is no global
    instance.
    """

    def __init__(self) -> None:
        self._entries: list[RegisteredExample] = []
        self._by_identifier: dict[Identifier, RegisteredExample] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegisteredExample]:
        return iter(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    @property
    def entries(self) -> list[RegisteredExample]:
        return list(self._entries)

    @property
    def identifiers(self) -> list[Identifier]:
        return [entry.identifier for entry in self._entries]

    def get(self, identifier: Identifier) -> RegisteredExample | None:
        return self._by_identifier.get(identifier)

    def register(
        self, description: str, examples: Sequence[Example[Any]]
    ) -> list[RegisteredExample]:
        """Register a batch of examples under one description.

        Every example gets the identifier ``test<sanitized description>_<index>``.
        The whole batch is validated before anything is stored, so a failing
        call leaves the registry untouched.

        Callers must keep sanitized descriptions distinct across separate calls:
        two calls with the same description both start at index 0 and collide.

        Raises:
            InvalidDescriptionError: if description is not a non-blank string.
            EmptyRegistrationError: if examples is empty.
            IncompleteExampleError: if any item is not a finished Example.
            DuplicateIdentifierError: if any derived identifier already exists.
        """
        if not isinstance(description, str) or not description.strip():
            raise InvalidDescriptionError(description)
        if not examples:
            raise EmptyRegistrationError(description)

        batch: list[RegisteredExample] = []
        for index, example in enumerate(examples):
            if not isinstance(example, Example):
                raise IncompleteExampleError(
                    description=description, index=index, received=example
                )
            identifier = derive_identifier(description, index)
            if identifier in self._by_identifier:
                raise DuplicateIdentifierError(
                    identifier=identifier, description=description
                )
            batch.append(
                RegisteredExample(
                    identifier=identifier,
                    description=description,
                    index=index,
                    example=example,
                )
            )

        self._store(batch)
        return batch

    def for_example(
        self, description: str, *examples: Example[Any]
    ) -> list[RegisteredExample]:
        """Prose-style registration: ``registry.for_example("...", ex1, ex2)``."""
        return self.register(description, examples)

    for_instance = for_example
    i_e = for_example

    def extend(self, other: "Registry") -> None:
        """Append every entry of ``other``, keeping its order and identifiers.

        Raises:
            DuplicateIdentifierError: if any identifier of ``other`` is already
                present; nothing is appended in that case.
        """
        for entry in other:
            if entry.identifier in self._by_identifier:
                raise DuplicateIdentifierError(
                    identifier=entry.identifier, description=entry.description
                )
        self._store(list(other))

    def _store(self, batch: list[RegisteredExample]) -> None:
        for entry in batch:
            self._entries.append(entry)
            self._by_identifier[entry.identifier] = entry
