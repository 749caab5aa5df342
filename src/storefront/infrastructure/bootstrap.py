"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.add_products import AddProductsHandler
from storefront.application.apply_promotion import ApplyPromotionHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.crud import CrudService
from storefront.application.health import HealthCheckHandler
from storefront.application.remove_products import (
    RemoveProductHandler,
    RemoveProductsHandler,
)
from storefront.application.results import ResultCode
from storefront.application.seed_catalog import SeedCatalogHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.validators import (
    order_validator,
    promotion_validator,
    validate_customer,
    validate_product,
)
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.promotion import Promotion
from storefront.domain.repository.repository import Repository
from storefront.infrastructure.persistence.codecs import (
    CustomerCodec,
    OrderCodec,
    ProductCodec,
    PromotionCodec,
)
from storefront.infrastructure.persistence.in_memory_repository import (
    InMemoryRepository,
)
from storefront.infrastructure.persistence.json_repository import JsonFileRepository
from storefront.infrastructure.settings import Settings


@dataclass(frozen=True)
class Repositories:
    products: Repository[Product]
    customers: Repository[Customer]
    promotions: Repository[Promotion]
    orders: Repository[Order]


def repositories(settings: Settings) -> Repositories:
    if settings.storage == "memory":
        return in_memory_repositories()
    return json_repositories(settings)


def in_memory_repositories() -> Repositories:
    return Repositories(
        products=InMemoryRepository(),
        customers=InMemoryRepository(),
        promotions=InMemoryRepository(),
        orders=InMemoryRepository(),
    )


def json_repositories(settings: Settings) -> Repositories:
    data_dir = settings.data_dir
    return Repositories(
        products=JsonFileRepository(data_dir / "products.json", ProductCodec()),
        customers=JsonFileRepository(data_dir / "customers.json", CustomerCodec()),
        promotions=JsonFileRepository(data_dir / "promotions.json", PromotionCodec()),
        orders=JsonFileRepository(data_dir / "orders.json", OrderCodec()),
    )


# --- CRUD services -----------------------------------------------------------


def product_service(repos: Repositories) -> CrudService[Product]:
    return CrudService(
        repos.products, "Product", ResultCode.INVALID_PRODUCT, validate_product
    )


def customer_service(repos: Repositories) -> CrudService[Customer]:
    return CrudService(
        repos.customers, "Customer", ResultCode.INVALID_CUSTOMER, validate_customer
    )


def promotion_service(repos: Repositories) -> CrudService[Promotion]:
    return CrudService(
        repos.promotions,
        "Promotion",
        ResultCode.INVALID_PROMOTION,
        promotion_validator(repos.products),
    )


def order_service(repos: Repositories) -> CrudService[Order]:
    return CrudService(
        repos.orders,
        "Order",
        ResultCode.NOT_CREATED,
        order_validator(repos.products, repos.customers, repos.promotions),
    )


# --- Order use cases ---------------------------------------------------------


def create_order_handler(repos: Repositories) -> CreateOrderHandler:
    return CreateOrderHandler(
        repos.orders, repos.products, repos.customers, repos.promotions
    )


def add_products_handler(repos: Repositories) -> AddProductsHandler:
    return AddProductsHandler(repos.orders, repos.products)


def remove_products_handler(repos: Repositories) -> RemoveProductsHandler:
    return RemoveProductsHandler(repos.orders)


def remove_product_handler(repos: Repositories) -> RemoveProductHandler:
    return RemoveProductHandler(repos.orders, repos.products)


def apply_promotion_handler(repos: Repositories) -> ApplyPromotionHandler:
    return ApplyPromotionHandler(repos.orders, repos.promotions)


def show_order_handler(repos: Repositories) -> ShowOrderHandler:
    return ShowOrderHandler(repos.orders)


# --- Maintenance -------------------------------------------------------------


def seed_catalog_handler(repos: Repositories) -> SeedCatalogHandler:
    return SeedCatalogHandler(repos.customers, repos.products, repos.promotions)


def health_check_handler(repos: Repositories) -> HealthCheckHandler:
    return HealthCheckHandler(
        {
            "products": repos.products,
            "customers": repos.customers,
            "promotions": repos.promotions,
        },
        repos.orders,
    )
