"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockLineDTO:
    id: int | str
    name: str
    quantity: int


@dataclass(frozen=True)
class PatientDTO:
    id: str
    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class PrescriptionDTO:
    id: str
    medication_name: str
    date_issued: str  # formatted, e.g. "2026-10-19"


@dataclass(frozen=True)
class InventoryLineDTO:
    id: int
    name: str
    quantity: int
    date_added: str


@dataclass(frozen=True)
class TransactionResultDTO:
    """Output: what happened to one transaction."""

    transaction_id: int
    channel: str
    messages: list[str]
    applied: bool
    balance: str  # account balance after this transaction


@dataclass(frozen=True)
class GradingResultDTO:
    """Output: outcome of a grading run.

    ``sample_created`` means the input was missing, a sample file was
    written in its place and no report was produced.
    """

    input_path: str
    output_path: str
    sample_created: bool
    student_count: int = 0
