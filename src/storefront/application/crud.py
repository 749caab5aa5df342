"""Generic storage-backed CRUD operations.

``CrudService`` is parameterized over the entity type and composed
with a validation function instead of being subclassed per entity.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic

from storefront.application.results import OperationResult, ResultCode
from storefront.domain.repository.repository import Repository, T

logger = logging.getLogger(__name__)


def _accept_all(entity: object) -> OperationResult | None:
    return None


class CrudService(Generic[T]):

    def __init__(
        self,
        repository: Repository[T],
        entity_name: str,
        invalid_code: ResultCode,
        validate: Callable[[T], OperationResult | None] = _accept_all,
    ) -> None:
        self._repository = repository
        self._entity_name = entity_name
        self._invalid_code = invalid_code
        self._validate = validate

    def add(self, entity: T) -> OperationResult[int]:
        """Store a new entity and return its assigned id."""
        if entity.id is not None:
            return self._reject(
                self._invalid_code,
                f"New {self._entity_name} must not carry an id (got #{entity.id})",
            )
        failure = self._validate(entity)
        if failure is not None:
            return self._reject(failure.error, failure.message)

        entity_id = self._repository.save(entity)
        logger.info("%s #%s created", self._entity_name, entity_id)
        return OperationResult.success(entity_id)

    def update(self, entity: T) -> OperationResult[bool]:
        """Replace a stored entity; it must already exist."""
        if (entity.id or 0) <= 0:
            return self._reject(
                self._invalid_code, f"{self._entity_name} id must be positive"
            )
        if not self._repository.contains(entity.id):
            return self._not_found(entity.id)
        failure = self._validate(entity)
        if failure is not None:
            return self._reject(failure.error, failure.message)

        self._repository.save(entity)
        logger.info("%s #%s updated", self._entity_name, entity.id)
        return OperationResult.success(True)

    def get(self, entity_id: int) -> OperationResult[T]:
        entity = self._repository.get_by_id(entity_id)
        if entity is None:
            return self._not_found(entity_id)
        return OperationResult.success(entity)

    def list_all(self) -> list[T]:
        return self._repository.list_all()

    def print(self, entity_id: int) -> OperationResult[str]:
        """Human-readable rendering of one stored entity."""
        result = self.get(entity_id)
        if not result.ok:
            return OperationResult.failure(result.error, result.message)
        return OperationResult.success(str(result.value))

    def delete(self, entity_id: int) -> OperationResult[bool]:
        if self._repository.delete(entity_id) != 1:
            return self._not_found(entity_id)
        logger.info("%s #%s deleted", self._entity_name, entity_id)
        return OperationResult.success(True)

    # --- Internal helpers -----------------------------------------------------

    def _not_found(self, entity_id: int) -> OperationResult:
        return self._reject(
            ResultCode.NOT_FOUND, f"{self._entity_name} #{entity_id} not found"
        )

    def _reject(self, code: ResultCode, message: str) -> OperationResult:
        logger.warning("%s rejected: %s", self._entity_name, message)
        return OperationResult.failure(code, message)
