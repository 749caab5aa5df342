"""Promotion entity: a percentage discount on an order or on one product."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError

MIN_DISCOUNT_PERCENTAGE = 1
MAX_DISCOUNT_PERCENTAGE = 100


class PromotionType(Enum):
    PRODUCT = "PRODUCT"
    ORDER = "ORDER"


@dataclass
class Promotion:
    """A discount that can be attached to an order.

    Invariants (checked on construction):
    - a PRODUCT promotion targets a product with a positive id
    - ``discount_percentage`` is within 1..100

    ``target_id`` is 0 when there is no target.
    """

    id: int | None
    type: PromotionType
    discount_percentage: int
    description: str = ""
    target_id: int | None = 0

    def __post_init__(self) -> None:
        if self.target_id is None:
            self.target_id = 0
        if self.type == PromotionType.PRODUCT and self.target_id <= 0:
            raise ValidationError(
                f"Target product must be set for promotions of type {self.type.value}"
            )
        if not (
            MIN_DISCOUNT_PERCENTAGE
            <= self.discount_percentage
            <= MAX_DISCOUNT_PERCENTAGE
        ):
            raise ValidationError(
                f"Invalid discount {self.discount_percentage}%. Must be between "
                f"{MIN_DISCOUNT_PERCENTAGE} and {MAX_DISCOUNT_PERCENTAGE}"
            )

    @property
    def has_target(self) -> bool:
        return self.target_id > 0

    def __str__(self) -> str:
        if self.has_target:
            return (
                f"Promotion #{self.id or 0} [{self.type.value}] "
                f"{self.discount_percentage}% on product #{self.target_id}"
            )
        return f"Promotion #{self.id or 0} [{self.type.value}] {self.discount_percentage}%"
