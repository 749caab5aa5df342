"""Order aggregate: the core of the domain.

An order references the products it was built with, the customer who
placed it and, optionally, one promotion.  Totals are derived state:
they are recomputed eagerly after every mutation, always from the live
product list and the current promotion.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from storefront.domain.exceptions import EmptyProductListError
from storefront.domain.model.customer import Customer
from storefront.domain.model.product import Product
from storefront.domain.model.promotion import Promotion
from storefront.domain.model.value_objects import Money
from storefront.domain.service.discount_calculator import (
    calculate_discount,
    is_promotion_target,
    subtotal_of,
)

PROMOTED_MARKER = " [PROMO]"


@dataclass
class Order:
    """Aggregate root for orders.

    Use the ``Order.create()`` factory for new orders; it enforces the
    construction rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.

    ``products`` and ``customer`` are kept by reference, never copied.
    """

    id: int | None
    products: list[Product]
    customer: Customer
    promotion: Promotion | None = None

    _subtotal: Money = field(init=False, repr=False, compare=False)
    _discount_amount: Money = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._recalculate_totals()

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        products: list[Product],
        customer: Customer,
        promotion: Promotion | None = None,
    ) -> Order:
        """Create a new order.

        Raises EmptyProductListError when ``products`` is empty; that is
        the only way an order can fail to exist.
        """
        if not products:
            raise EmptyProductListError("Order must contain at least one product")

        order = Order(id=None, products=products, customer=customer)
        order.apply_promotion(promotion)
        return order

    # --- Mutations ------------------------------------------------------------

    def add_products(self, products: Iterable[Product]) -> None:
        """Append products, skipping those without a positive id."""
        to_add = [product for product in products if (product.id or 0) > 0]
        if not to_add:
            return

        self.products.extend(to_add)
        self._recalculate_totals()

    def remove_products(self, product_ids: Iterable[int]) -> int:
        """Remove every product whose id is listed.

        Duplicated products are all removed and each one is counted.
        Returns the number of products removed.
        """
        ids = {product_id for product_id in product_ids if product_id > 0}
        if not ids:
            return 0

        kept = [product for product in self.products if (product.id or -1) not in ids]
        removed = len(self.products) - len(kept)
        # Slice assignment keeps the caller's list object.
        self.products[:] = kept

        self._recalculate_totals()
        return removed

    def remove_product(self, product_id: int) -> int:
        return self.remove_products([product_id])

    def apply_promotion(self, promotion: Promotion | None) -> Money:
        """Attach ``promotion`` and return the resulting discount.

        ``None`` is a no-op returning zero: it never detaches the current
        promotion.
        """
        if promotion is None:
            return Money.zero()

        self.promotion = promotion
        self._recalculate_totals()
        return self._discount_amount

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        """Sum of product values before any discount."""
        return self._subtotal

    @property
    def discount_amount(self) -> Money:
        return self._discount_amount

    @property
    def total(self) -> Money:
        return self._subtotal - self._discount_amount

    def is_product_promoted(self, product: Product) -> bool:
        return is_promotion_target(self.promotion, product.id)

    # --- Display --------------------------------------------------------------

    def to_display_string(self) -> str:
        lines = [
            f"Order #{self.id or 0}",
            f"\tClient: {self.customer.name.upper()}",
            "\tProducts:",
            "",
        ]
        for product in self.products:
            marker = PROMOTED_MARKER if self.is_product_promoted(product) else ""
            lines.append(
                f"\t\t{product.id or 0}\t{product.name.upper()}\t{product.value}{marker}"
            )
        lines.append("")
        lines.append(f"\tDiscount: {self._discount_amount}")
        lines.append(f"\tTotal: {self.total}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_display_string()

    # --- Internal helpers -----------------------------------------------------

    def _recalculate_totals(self) -> None:
        self._subtotal = subtotal_of(self.products)
        self._discount_amount = calculate_discount(
            self.promotion, self.products, self._subtotal
        )
