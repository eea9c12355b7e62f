"""Application services: warehouse stock use cases."""

from __future__ import annotations

from typing import Generic

from coursework.domain.repository.keyed_repository import K, S, StockRepository


class AddStockItemHandler(Generic[K, S]):

    def __init__(self, stock_repo: StockRepository[K, S]) -> None:
        self._stock_repo = stock_repo

    def handle(self, item: S) -> None:
        self._stock_repo.add(item)


class IncreaseStockHandler(Generic[K, S]):

    def __init__(self, stock_repo: StockRepository[K, S]) -> None:
        self._stock_repo = stock_repo

    def handle(self, item_id: K, amount: int) -> int:
        """Add ``amount`` to the item's quantity and return the new total.

        A negative ``amount`` that would take stock below zero is rejected
        by the repository with InvalidQuantityError.
        """
        current = self._stock_repo.get_by_id(item_id)
        new_quantity = current.quantity + amount
        self._stock_repo.update_quantity(item_id, new_quantity)
        return new_quantity


class UpdateQuantityHandler(Generic[K, S]):

    def __init__(self, stock_repo: StockRepository[K, S]) -> None:
        self._stock_repo = stock_repo

    def handle(self, item_id: K, new_quantity: int) -> None:
        self._stock_repo.update_quantity(item_id, new_quantity)


class RemoveStockItemHandler(Generic[K, S]):

    def __init__(self, stock_repo: StockRepository[K, S]) -> None:
        self._stock_repo = stock_repo

    def handle(self, item_id: K) -> None:
        self._stock_repo.remove_by_id(item_id)
