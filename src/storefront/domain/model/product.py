"""Product entity.

Products live independently of orders. An order holds references to
the products it was built with; replacing a product in the catalog
does not touch orders that already reference the old one.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``value`` is expected to be positive; that rule belongs to the
    catalog service, so it is not re-checked here.
    """

    id: int | None
    name: str
    value: Money

    def __str__(self) -> str:
        return f"Product #{self.id or 0} {self.name} ({self.value})"
