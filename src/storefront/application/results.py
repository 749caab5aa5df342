"""Outcome of an application operation.

Every public use case returns an ``OperationResult``: either a value or
a ``ResultCode`` explaining why nothing happened.  The codes keep the
negative integer space callers use to tell failures apart from the
positive ids of created entities.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, TypeVar

V = TypeVar("V")


class ResultCode(IntEnum):
    INVALID_PRODUCT = -1
    INVALID_CUSTOMER = -2
    INVALID_PROMOTION = -3
    NOT_CREATED = -4
    NOT_FOUND = -5
    EMPTY_PRODUCT_LIST = -6
    UNDEFINED = -999


@dataclass(frozen=True)
class OperationResult(Generic[V]):

    value: V | None = None
    error: ResultCode | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(value: V) -> OperationResult[V]:
        return OperationResult(value=value)

    @staticmethod
    def failure(error: ResultCode, message: str) -> OperationResult[V]:
        return OperationResult(error=error, message=message)
