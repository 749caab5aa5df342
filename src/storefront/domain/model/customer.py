"""Customer entity. Referenced, never owned, by orders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Customer:

    id: int | None
    name: str

    def __str__(self) -> str:
        return f"Customer #{self.id or 0} {self.name}"
