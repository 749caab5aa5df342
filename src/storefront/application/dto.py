"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single product line as displayed to the user."""

    product_id: int
    product_name: str
    value: str  # formatted, e.g. "$15.00"
    promoted: bool


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    lines: list[OrderLineDTO]
    promotion: str | None
    subtotal: str
    discount: str
    total: str
