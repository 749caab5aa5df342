"""Dict-backed implementation of Repository.

Each instance owns its storage, so two repositories never share state.
A lock keeps single reads and writes consistent; a caller's
read-mutate-save sequence is still not isolated from other callers.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from storefront.domain.repository.repository import Repository, T

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[T]):

    def __init__(self, entities: Iterable[T] | None = None) -> None:
        self._store: dict[int, T] = {}
        self._counter = 0
        self._lock = threading.Lock()
        for entity in entities or []:
            self.save(entity)

    # --- Repository interface -------------------------------------------------

    def next_id(self) -> int:
        with self._lock:
            return self._counter + 1

    def get_by_id(self, entity_id: int) -> T | None:
        with self._lock:
            return self._store.get(entity_id)

    def list_all(self) -> list[T]:
        with self._lock:
            return [self._store[key] for key in sorted(self._store)]

    def get_many(self, entity_ids: Iterable[int]) -> list[T]:
        wanted = set(entity_ids)
        with self._lock:
            return [self._store[key] for key in sorted(self._store) if key in wanted]

    def save(self, entity: T) -> int:
        with self._lock:
            if entity.id is None:
                self._counter += 1
                entity.id = self._counter
            else:
                # Keep the counter ahead of explicitly assigned ids.
                self._counter = max(self._counter, entity.id)
            self._store[entity.id] = entity
            logger.debug("Stored %s #%s", type(entity).__name__, entity.id)
            return entity.id

    def delete(self, entity_id: int) -> int:
        with self._lock:
            if self._store.pop(entity_id, None) is None:
                return 0
            logger.debug("Deleted entity #%s", entity_id)
            return 1

    def count(self) -> int:
        with self._lock:
            return len(self._store)
