"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderLineDTO
from storefront.application.results import OperationResult, ResultCode
from storefront.domain.model.order import Order
from storefront.domain.repository.repository import Repository


class ShowOrderHandler:

    def __init__(self, order_repo: Repository[Order]) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OperationResult[OrderDTO]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return OperationResult.failure(
                ResultCode.NOT_FOUND, f"Order #{order_id} not found"
            )
        return OperationResult.success(self._to_dto(order))

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer.name,
            lines=[
                OrderLineDTO(
                    product_id=product.id or 0,
                    product_name=product.name,
                    value=str(product.value),
                    promoted=order.is_product_promoted(product),
                )
                for product in order.products
            ],
            promotion=str(order.promotion) if order.promotion is not None else None,
            subtotal=str(order.subtotal),
            discount=str(order.discount_amount),
            total=str(order.total),
        )
