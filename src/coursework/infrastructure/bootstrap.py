"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Each call builds a fresh store, so no state is shared between commands.
"""

from __future__ import annotations

import os
from pathlib import Path

from coursework.domain.model.healthcare import Patient, Prescription
from coursework.domain.model.warehouse import ElectronicItem, GroceryItem
from coursework.infrastructure.persistence.in_memory_repository import (
    InMemoryRepository,
    InMemoryStockRepository,
)
from coursework.infrastructure.persistence.json_inventory_log import (
    JsonInventoryLog,
)

DATA_DIR_ENV = "COURSEWORK_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def inventory_file() -> Path:
    return data_dir() / "inventory.json"


def students_file() -> Path:
    return data_dir() / "students.txt"


def report_file() -> Path:
    return data_dir() / "report.txt"


def inventory_log(file_path: Path | None = None) -> JsonInventoryLog:
    return JsonInventoryLog(file_path or inventory_file())


def electronics_repository() -> InMemoryStockRepository[int, ElectronicItem]:
    return InMemoryStockRepository()


def groceries_repository() -> InMemoryStockRepository[int, GroceryItem]:
    return InMemoryStockRepository()


def patient_repository() -> InMemoryRepository[str, Patient]:
    return InMemoryRepository()


def prescription_repository() -> InMemoryRepository[str, Prescription]:
    return InMemoryRepository()
