"""JSON-file-backed implementation of Repository.

One file per entity type holding a list of records. Every call
re-reads the file, so separate CLI invocations see each other's
writes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import RepositoryError
from storefront.domain.repository.repository import Repository, T
from storefront.infrastructure.persistence.codecs import Codec

logger = logging.getLogger(__name__)


class JsonFileRepository(Repository[T]):

    def __init__(self, file_path: Path, codec: Codec[T]) -> None:
        self._file_path = file_path
        self._codec = codec
        self._ensure_file()

    # --- Repository interface -------------------------------------------------

    def next_id(self) -> int:
        records = self._load_raw()
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    def get_by_id(self, entity_id: int) -> T | None:
        for raw in self._load_raw():
            if raw["id"] == entity_id:
                return self._codec.to_domain(raw)
        return None

    def list_all(self) -> list[T]:
        records = sorted(self._load_raw(), key=lambda r: r["id"])
        return [self._codec.to_domain(raw) for raw in records]

    def save(self, entity: T) -> int:
        records = self._load_raw()

        if entity.id is None:
            entity.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == entity.id:
                records[i] = self._codec.to_raw(entity)
                replaced = True
                break
        if not replaced:
            records.append(self._codec.to_raw(entity))

        self._persist_raw(records)
        logger.debug("Saved record #%s to %s", entity.id, self._file_path.name)
        return entity.id

    def delete(self, entity_id: int) -> int:
        records = self._load_raw()
        kept = [raw for raw in records if raw["id"] != entity_id]
        removed = len(records) - len(kept)
        if removed:
            self._persist_raw(kept)
            logger.debug("Deleted record #%s from %s", entity_id, self._file_path.name)
        return removed

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RepositoryError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise RepositoryError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise RepositoryError(f"Cannot create {self._file_path}: {exc}") from exc
