"""Serialization between domain entities and JSON-compatible dicts."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.promotion import Promotion, PromotionType
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.repository import T


class Codec(Protocol[T]):

    def to_raw(self, entity: T) -> dict: ...

    def to_domain(self, raw: dict) -> T: ...


class ProductCodec:

    @staticmethod
    def to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "value": str(product.value.amount),
            "currency": product.value.currency,
        }

    @staticmethod
    def to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            value=Money(Decimal(raw["value"]), raw.get("currency", "USD")),
        )


class CustomerCodec:

    @staticmethod
    def to_raw(customer: Customer) -> dict:
        return {"id": customer.id, "name": customer.name}

    @staticmethod
    def to_domain(raw: dict) -> Customer:
        return Customer(id=raw["id"], name=raw["name"])


class PromotionCodec:

    @staticmethod
    def to_raw(promotion: Promotion) -> dict:
        return {
            "id": promotion.id,
            "type": promotion.type.value,
            "target_id": promotion.target_id,
            "discount_percentage": promotion.discount_percentage,
            "description": promotion.description,
        }

    @staticmethod
    def to_domain(raw: dict) -> Promotion:
        return Promotion(
            id=raw["id"],
            type=PromotionType(raw["type"]),
            target_id=raw.get("target_id", 0),
            discount_percentage=raw["discount_percentage"],
            description=raw.get("description", ""),
        )


class OrderCodec:
    """Orders embed copies of their products, customer and promotion."""

    @staticmethod
    def to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer": CustomerCodec.to_raw(order.customer),
            "products": [ProductCodec.to_raw(p) for p in order.products],
            "promotion": (
                PromotionCodec.to_raw(order.promotion)
                if order.promotion is not None
                else None
            ),
        }

    @staticmethod
    def to_domain(raw: dict) -> Order:
        promotion = raw.get("promotion")
        return Order(
            id=raw["id"],
            products=[ProductCodec.to_domain(p) for p in raw["products"]],
            customer=CustomerCodec.to_domain(raw["customer"]),
            promotion=PromotionCodec.to_domain(promotion) if promotion else None,
        )
