"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from typing import Generic

from coursework.application.dto import StockLineDTO
from coursework.domain.repository.keyed_repository import K, S, StockRepository


class ShowStockHandler(Generic[K, S]):

    def __init__(self, stock_repo: StockRepository[K, S]) -> None:
        self._stock_repo = stock_repo

    def handle(self) -> list[StockLineDTO]:
        return [
            StockLineDTO(id=item.id, name=item.name, quantity=item.quantity)
            for item in self._stock_repo.list_all()
        ]
