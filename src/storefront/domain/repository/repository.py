"""Abstract repository shared by every storable entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON) live in
the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar


class Storable(Protocol):
    """Anything with an optional, repository-assigned integer id."""

    id: int | None


T = TypeVar("T", bound=Storable)


class Repository(ABC, Generic[T]):

    @abstractmethod
    def next_id(self) -> int:
        """Return the id the next unsaved entity will receive."""

    @abstractmethod
    def get_by_id(self, entity_id: int) -> T | None:
        """Return an entity by its id, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return every stored entity, in id order."""

    @abstractmethod
    def save(self, entity: T) -> int:
        """Persist a new or updated entity and return its id.

        Entities without an id are assigned ``next_id()`` first.
        """

    @abstractmethod
    def delete(self, entity_id: int) -> int:
        """Delete an entity and return how many were removed (0 or 1)."""

    # --- Derived lookups ------------------------------------------------------

    def get_many(self, entity_ids: Iterable[int]) -> list[T]:
        """Return one entity per stored id in ``entity_ids``.

        Unknown ids are skipped, so a result shorter than the distinct
        input means some id was invalid.
        """
        wanted = set(entity_ids)
        return [entity for entity in self.list_all() if entity.id in wanted]

    def contains(self, entity_id: int) -> bool:
        return entity_id > 0 and self.get_by_id(entity_id) is not None

    def contains_all(self, entity_ids: Iterable[int]) -> bool:
        wanted = set(entity_ids)
        if any(entity_id <= 0 for entity_id in wanted):
            return False
        return len(self.get_many(wanted)) == len(wanted)

    def count(self) -> int:
        return len(self.list_all())
