"""Application service: populate an empty store with sample data."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.model.customer import Customer
from storefront.domain.model.product import Product
from storefront.domain.model.promotion import Promotion, PromotionType
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedSummary:
    customers: int
    products: int
    promotions: int


class SeedCatalogHandler:
    """Seed customers, products and promotions.

    Each store is only seeded while empty, so running this twice does
    not duplicate anything.
    """

    def __init__(
        self,
        customer_repo: Repository[Customer],
        product_repo: Repository[Product],
        promotion_repo: Repository[Promotion],
    ) -> None:
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._promotion_repo = promotion_repo

    def handle(
        self,
        customers: int = 1,
        products: int = 3,
        promotions: int = 2,
    ) -> SeedSummary:
        summary = SeedSummary(
            customers=self._seed(self._customer_repo, self._customers(customers)),
            products=self._seed(self._product_repo, self._products(products)),
            promotions=self._seed(self._promotion_repo, self._promotions(promotions)),
        )
        logger.info("Seeded %s", summary)
        return summary

    @staticmethod
    def _seed(repo: Repository, entities: list) -> int:
        if repo.count() > 0:
            return 0
        for entity in entities:
            repo.save(entity)
        return len(entities)

    @staticmethod
    def _customers(quantity: int) -> list[Customer]:
        return [Customer(id=None, name=f"Customer-{i}") for i in range(1, quantity + 1)]

    @staticmethod
    def _products(quantity: int) -> list[Product]:
        return [
            Product(id=None, name=f"Product-{i}", value=Money.of(i * 10))
            for i in range(1, quantity + 1)
        ]

    @staticmethod
    def _promotions(quantity: int) -> list[Promotion]:
        # Alternate: odd entries discount the whole order, even entries
        # target the product with the same index.
        promotions = []
        for i in range(1, quantity + 1):
            if i % 2 == 0:
                promotions.append(
                    Promotion(
                        id=None,
                        type=PromotionType.PRODUCT,
                        target_id=i,
                        discount_percentage=i * 2,
                        description=f"{i * 2}% of discount on product code {i}",
                    )
                )
            else:
                promotions.append(
                    Promotion(
                        id=None,
                        type=PromotionType.ORDER,
                        discount_percentage=i * 5,
                        description=f"{i * 5}% of discount above total",
                    )
                )
        return promotions
