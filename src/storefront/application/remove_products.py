"""Application service: Remove Products from an existing order.

Emptying an order this way is allowed; its total simply drops to zero.
"""

from __future__ import annotations

import logging

from storefront.application.results import OperationResult, ResultCode
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class RemoveProductsHandler:

    def __init__(self, order_repo: Repository[Order]) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, product_ids: list[int]) -> OperationResult[int]:
        """Remove the listed products and return how many were removed."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return OperationResult.failure(
                ResultCode.NOT_FOUND, f"Order #{order_id} not found"
            )

        removed = order.remove_products(product_ids)
        self._order_repo.save(order)

        logger.info("Removed %d product(s) from order #%s", removed, order_id)
        return OperationResult.success(removed)


class RemoveProductHandler:
    """Remove a single catalog product from an order."""

    def __init__(
        self,
        order_repo: Repository[Order],
        product_repo: Repository[Product],
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int, product_id: int) -> OperationResult[int]:
        if not self._product_repo.contains(product_id):
            return OperationResult.failure(
                ResultCode.INVALID_PRODUCT, f"Product #{product_id} does not exist"
            )

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return OperationResult.failure(
                ResultCode.NOT_FOUND, f"Order #{order_id} not found"
            )

        removed = order.remove_product(product_id)
        self._order_repo.save(order)

        logger.info("Removed product #%s from order #%s (%d)", product_id, order_id, removed)
        return OperationResult.success(removed)
