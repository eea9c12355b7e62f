"""InventoryItem — a record appended to the inventory log.

Unlike warehouse stock, these records are immutable once logged and are
the only entities that outlive a run (see ``JsonInventoryLog``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class InventoryItem:
    id: int
    name: str
    quantity: int
    date_added: datetime
