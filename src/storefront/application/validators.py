"""Entity-specific validation rules.

Each validator returns ``None`` when the entity is acceptable, or the
``OperationResult`` failure to report.  ``CrudService`` composes them;
nothing here touches storage except through the repositories passed in.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from storefront.application.results import OperationResult, ResultCode
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.promotion import Promotion, PromotionType
from storefront.domain.repository.repository import Repository


def validate_product(product: Product) -> OperationResult | None:
    if not product.name or not product.name.strip():
        return OperationResult.failure(
            ResultCode.INVALID_PRODUCT, "Product name is required"
        )
    if product.value.amount <= Decimal("0"):
        return OperationResult.failure(
            ResultCode.INVALID_PRODUCT, "Product value must be greater than zero"
        )
    return None


def validate_customer(customer: Customer) -> OperationResult | None:
    if not customer.name or not customer.name.strip():
        return OperationResult.failure(
            ResultCode.INVALID_CUSTOMER, "Customer name is required"
        )
    return None


def promotion_validator(
    product_repo: Repository[Product],
) -> Callable[[Promotion], OperationResult | None]:
    """Build a validator that checks a promotion's target is in the catalog."""

    def validate(promotion: Promotion) -> OperationResult | None:
        if promotion.type == PromotionType.PRODUCT and not product_repo.contains(
            promotion.target_id
        ):
            return OperationResult.failure(
                ResultCode.INVALID_PROMOTION,
                f"Target product #{promotion.target_id} does not exist",
            )
        return None

    return validate


def order_validator(
    product_repo: Repository[Product],
    customer_repo: Repository[Customer],
    promotion_repo: Repository[Promotion],
) -> Callable[[Order], OperationResult | None]:
    """Build a validator that checks every reference an order holds."""

    def validate(order: Order) -> OperationResult | None:
        product_ids = [product.id or 0 for product in order.products]
        if not product_repo.contains_all(product_ids):
            return OperationResult.failure(
                ResultCode.INVALID_PRODUCT, "Order references an unknown product"
            )
        if not customer_repo.contains(order.customer.id or 0):
            return OperationResult.failure(
                ResultCode.INVALID_CUSTOMER, "Order references an unknown customer"
            )
        if order.promotion is not None and not promotion_repo.contains(
            order.promotion.id or 0
        ):
            return OperationResult.failure(
                ResultCode.INVALID_PROMOTION, "Order references an unknown promotion"
            )
        return None

    return validate
