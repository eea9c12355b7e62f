"""Warehouse stock items.

Both item kinds share the id/name/quantity shape that the stock
repository relies on; only ``quantity`` changes after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from coursework.domain.exceptions import InvalidQuantityError


@dataclass
class StockItem:
    """Base shape for anything kept in a stock repository.

    Invariant: ``quantity`` is never negative.
    """

    id: int
    name: str
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise InvalidQuantityError(
                f"Quantity cannot be negative, got {self.quantity}."
            )


@dataclass
class ElectronicItem(StockItem):
    brand: str = ""
    warranty_months: int = 0


@dataclass
class GroceryItem(StockItem):
    expiry_date: date | None = None
