"""Application services: record inventory to the JSON log and read it back."""

from __future__ import annotations

from typing import Iterable

from coursework.application.dto import InventoryLineDTO
from coursework.domain.model.inventory import InventoryItem
from coursework.infrastructure.persistence.json_inventory_log import (
    JsonInventoryLog,
)


class RecordInventoryHandler:

    def __init__(self, inventory_log: JsonInventoryLog) -> None:
        self._inventory_log = inventory_log

    def handle(self, items: Iterable[InventoryItem]) -> bool:
        """Append ``items`` to the log and save it. Returns False if saving failed."""
        for item in items:
            self._inventory_log.add(item)
        return self._inventory_log.save_to_file()


class ShowInventoryHandler:

    def __init__(self, inventory_log: JsonInventoryLog) -> None:
        self._inventory_log = inventory_log

    def handle(self) -> list[InventoryLineDTO]:
        """Reload the log from disk and list it.

        If the file cannot be loaded the in-memory contents are listed.
        """
        self._inventory_log.load_from_file()
        return [
            InventoryLineDTO(
                id=item.id,
                name=item.name,
                quantity=item.quantity,
                date_added=item.date_added.date().isoformat(),
            )
            for item in self._inventory_log.list_all()
        ]
