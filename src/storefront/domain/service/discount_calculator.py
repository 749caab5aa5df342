"""Domain service: promotion discount calculation.

Pricing and display both ask "is this product the promotion target?"
through ``is_promotion_target`` so the printed marker and the numeric
discount always agree.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.model.product import Product
from storefront.domain.model.promotion import Promotion, PromotionType
from storefront.domain.model.value_objects import Money


def subtotal_of(products: Iterable[Product]) -> Money:
    result = Money.zero()
    for product in products:
        result = result + product.value
    return result


def is_promotion_target(promotion: Promotion | None, product_id: int | None) -> bool:
    """True when ``promotion`` is a PRODUCT promotion aimed at ``product_id``."""
    if promotion is None or promotion.type != PromotionType.PRODUCT:
        return False
    return promotion.has_target and promotion.target_id == (product_id or 0)


def find_target(promotion: Promotion | None, products: Iterable[Product]) -> Product | None:
    """Return the first product targeted by ``promotion``, if any."""
    for product in products:
        if is_promotion_target(promotion, product.id):
            return product
    return None


def calculate_discount(
    promotion: Promotion | None,
    products: list[Product],
    subtotal: Money,
) -> Money:
    """Discount ``promotion`` grants on ``products``.

    - no promotion: zero
    - ORDER: percentage of ``subtotal``
    - PRODUCT: percentage of the first targeted product's value, or zero
      when the target is not in the list
    """
    if promotion is None:
        return Money.zero(subtotal.currency)

    if promotion.type == PromotionType.ORDER:
        return subtotal.percentage(promotion.discount_percentage)

    target = find_target(promotion, products)
    if target is None:
        return Money.zero(subtotal.currency)
    return target.value.percentage(promotion.discount_percentage)
