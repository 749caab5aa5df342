"""Application service: Add Products to an existing order."""

from __future__ import annotations

import logging

from storefront.application.results import OperationResult, ResultCode
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class AddProductsHandler:

    def __init__(
        self,
        order_repo: Repository[Order],
        product_repo: Repository[Product],
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int, product_ids: list[int]) -> OperationResult[bool]:
        wanted = list(dict.fromkeys(product_ids))
        products = self._product_repo.get_many(wanted)
        if not wanted or len(products) != len(wanted):
            logger.warning("Cannot add products %s: unknown product", product_ids)
            return OperationResult.failure(
                ResultCode.INVALID_PRODUCT, "One or more products do not exist"
            )

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return OperationResult.failure(
                ResultCode.NOT_FOUND, f"Order #{order_id} not found"
            )

        by_id = {product.id: product for product in products}
        order.add_products([by_id[product_id] for product_id in wanted])
        self._order_repo.save(order)

        logger.info("Added %d product(s) to order #%s", len(wanted), order_id)
        return OperationResult.success(True)
