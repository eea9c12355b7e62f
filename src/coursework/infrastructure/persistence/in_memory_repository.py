"""Dict-backed implementations of the keyed repositories.

Entities are held by reference: whatever ``get_by_id`` returns is the
object in the store, so mutating it mutates the stored entity.
"""

from __future__ import annotations

import logging
from typing import Iterable

from coursework.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidQuantityError,
)
from coursework.domain.repository.keyed_repository import (
    K,
    KeyedRepository,
    S,
    StockRepository,
    T,
)

logger = logging.getLogger(__name__)


class InMemoryRepository(KeyedRepository[K, T]):

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._store: dict[K, T] = {}
        for item in items or []:
            self.add(item)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._store

    def __len__(self) -> int:
        return len(self._store)

    # --- KeyedRepository interface --------------------------------------------

    def add(self, item: T) -> None:
        if item.id in self._store:
            raise DuplicateEntityError(f"Item with ID {item.id!r} already exists.")
        self._store[item.id] = item
        logger.debug("Added %s %r", type(item).__name__, item.id)

    def get_by_id(self, item_id: K) -> T:
        try:
            return self._store[item_id]
        except KeyError:
            raise EntityNotFoundError(f"Item with ID {item_id!r} not found.") from None

    def remove_by_id(self, item_id: K) -> None:
        if item_id not in self._store:
            raise EntityNotFoundError(f"Item with ID {item_id!r} not found.")
        del self._store[item_id]
        logger.debug("Removed item %r", item_id)

    def list_all(self) -> list[T]:
        return list(self._store.values())


class InMemoryStockRepository(InMemoryRepository[K, S], StockRepository[K, S]):

    def update_quantity(self, item_id: K, new_quantity: int) -> None:
        if new_quantity < 0:
            raise InvalidQuantityError(
                f"Quantity cannot be negative, got {new_quantity}."
            )
        item = self.get_by_id(item_id)
        logger.debug(
            "Quantity of %r: %d -> %d", item_id, item.quantity, new_quantity
        )
        item.quantity = new_quantity
