"""Application service: Create Order use case.

Resolves the referenced customer, products and promotion, then lets
the Order aggregate enforce its construction rule.
"""

from __future__ import annotations

import logging

from storefront.application.results import OperationResult, ResultCode
from storefront.domain.exceptions import DomainException, EmptyProductListError
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.promotion import Promotion
from storefront.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: Repository[Order],
        product_repo: Repository[Product],
        customer_repo: Repository[Customer],
        promotion_repo: Repository[Promotion],
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._promotion_repo = promotion_repo

    def handle(
        self,
        customer_id: int,
        product_ids: list[int],
        promotion_id: int | None = None,
    ) -> OperationResult[int]:
        """Create a new order and return its id.

        Steps:
        1. Resolve every product id (all must exist).
        2. Resolve the customer and, if given, the promotion.
        3. Build the order (fails on an empty product list).
        4. Persist it.
        """
        wanted = list(dict.fromkeys(product_ids))
        products = self._product_repo.get_many(wanted)
        if len(products) != len(wanted):
            return _rejected(ResultCode.INVALID_PRODUCT, "One or more products do not exist")

        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            return _rejected(
                ResultCode.INVALID_CUSTOMER, f"Customer #{customer_id} not found"
            )

        promotion = None
        if promotion_id is not None:
            promotion = self._promotion_repo.get_by_id(promotion_id)
            if promotion is None:
                return _rejected(
                    ResultCode.INVALID_PROMOTION, f"Promotion #{promotion_id} not found"
                )

        # Keep the caller's product order, not the repository's.
        by_id = {product.id: product for product in products}
        try:
            order = Order.create(
                products=[by_id[product_id] for product_id in wanted],
                customer=customer,
                promotion=promotion,
            )
        except EmptyProductListError as exc:
            return _rejected(ResultCode.EMPTY_PRODUCT_LIST, str(exc))
        except DomainException as exc:
            return _rejected(ResultCode.NOT_CREATED, str(exc))

        order_id = self._order_repo.save(order)
        logger.info(
            "Order #%s created for customer #%s (total %s)",
            order_id, customer_id, order.total,
        )
        return OperationResult.success(order_id)


def _rejected(code: ResultCode, message: str) -> OperationResult:
    logger.warning("Order not created: %s", message)
    return OperationResult.failure(code, message)
