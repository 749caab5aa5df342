"""Application service: Apply Promotion to an order.

A product-targeted promotion whose product is not in the order is still
attached; it just yields no discount until the product is added.
"""

from __future__ import annotations

import logging

from storefront.application.results import OperationResult, ResultCode
from storefront.domain.model.order import Order
from storefront.domain.model.promotion import Promotion
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class ApplyPromotionHandler:

    def __init__(
        self,
        order_repo: Repository[Order],
        promotion_repo: Repository[Promotion],
    ) -> None:
        self._order_repo = order_repo
        self._promotion_repo = promotion_repo

    def handle(self, order_id: int, promotion_id: int) -> OperationResult[Money]:
        """Attach the promotion and return the resulting discount."""
        promotion = self._promotion_repo.get_by_id(promotion_id)
        if promotion is None:
            return OperationResult.failure(
                ResultCode.INVALID_PROMOTION, f"Promotion #{promotion_id} not found"
            )

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return OperationResult.failure(
                ResultCode.NOT_FOUND, f"Order #{order_id} not found"
            )

        discount = order.apply_promotion(promotion)
        self._order_repo.save(order)

        if discount.is_zero:
            logger.warning(
                "Promotion #%s attached to order #%s but grants no discount",
                promotion_id, order_id,
            )
        else:
            logger.info(
                "Promotion #%s applied to order #%s: discount %s",
                promotion_id, order_id, discount,
            )
        return OperationResult.success(discount)
