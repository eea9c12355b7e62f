"""JSON-file-backed log of InventoryItem records.

The log is an ordered in-memory list that can be written to, or replaced
from, a JSON file. File problems never escape: they are logged as a
warning and reported through the ``bool`` return value, and a failed
load leaves the in-memory list untouched.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from coursework.domain.exceptions import StorageError
from coursework.domain.model.inventory import InventoryItem

logger = logging.getLogger(__name__)


class JsonInventoryLog:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._log: list[InventoryItem] = []

    @property
    def file_path(self) -> Path:
        return self._file_path

    def add(self, item: InventoryItem) -> None:
        self._log.append(item)

    def list_all(self) -> list[InventoryItem]:
        return list(self._log)

    def save_to_file(self) -> bool:
        try:
            self._persist_raw([self._to_raw(item) for item in self._log])
        except StorageError as exc:
            logger.warning("Error saving to file: %s", exc)
            return False
        logger.info("Saved %d item(s) to %s", len(self._log), self._file_path)
        return True

    def load_from_file(self) -> bool:
        if not self._file_path.exists():
            logger.warning("No inventory file found at %s", self._file_path)
            return False
        try:
            items = [self._to_domain(raw) for raw in self._load_raw()]
        except StorageError as exc:
            logger.warning("Error loading from file: %s", exc)
            return False
        self._log = items
        logger.info("Loaded %d item(s) from %s", len(items), self._file_path)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "Id": item.id,
            "Name": item.name,
            "Quantity": item.quantity,
            "DateAdded": item.date_added.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        try:
            return InventoryItem(
                id=int(raw["Id"]),
                name=str(raw["Name"]),
                quantity=int(raw["Quantity"]),
                date_added=datetime.fromisoformat(raw["DateAdded"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"Malformed inventory record {raw!r}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list):
            raise StorageError(f"{self._file_path} does not hold a JSON array")
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc
