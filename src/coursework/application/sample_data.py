"""Sample records each exercise seeds its stores with.

Dates are computed relative to ``now`` so callers (and tests) can pin
the clock.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from coursework.domain.model.finance import Channel, Transaction
from coursework.domain.model.healthcare import Patient, Prescription
from coursework.domain.model.inventory import InventoryItem
from coursework.domain.model.value_objects import Money
from coursework.domain.model.warehouse import ElectronicItem, GroceryItem

SAVINGS_ACCOUNT_NUMBER = "Ha7927363jk"
SAVINGS_OPENING_BALANCE = Money.of("50000")


def _add_months(moment: datetime, months: int) -> datetime:
    month_index = moment.month - 1 + months
    year, month = moment.year + month_index // 12, month_index % 12 + 1
    # Clamp to the last day of the target month: Jan 31 + 1 month is Feb 28/29.
    last_day = calendar.monthrange(year, month)[1]
    return moment.replace(year=year, month=month, day=min(moment.day, last_day))


def electronics() -> list[ElectronicItem]:
    return [
        ElectronicItem(id=1, name="Laptop", quantity=5, brand="Dell", warranty_months=24),
        ElectronicItem(id=2, name="Smartphone", quantity=10, brand="Samsung", warranty_months=12),
        ElectronicItem(id=3, name="TV", quantity=3, brand="LG", warranty_months=36),
    ]


def groceries(now: datetime) -> list[GroceryItem]:
    return [
        GroceryItem(id=1, name="Rice", quantity=50, expiry_date=_add_months(now, 12).date()),
        GroceryItem(id=2, name="Milk", quantity=20, expiry_date=(now + timedelta(days=7)).date()),
        GroceryItem(id=3, name="Bread", quantity=15, expiry_date=(now + timedelta(days=2)).date()),
    ]


def patients() -> list[Patient]:
    return [
        Patient(id="D12", name="Kofi Annie", age=50, gender="Male"),
        Patient(id="S67", name="Albert Tetteh", age=25, gender="Male"),
        Patient(id="F12", name="Emelia Tetteh", age=19, gender="Female"),
    ]


def prescriptions(now: datetime) -> list[Prescription]:
    today = now.date()
    return [
        Prescription(id="P1", patient_id="D12", medication_name="Para", date_issued=today),
        Prescription(id="P2", patient_id="D12", medication_name="Vitamin D", date_issued=today - timedelta(days=2)),
        Prescription(id="P3", patient_id="S67", medication_name="Ibuprofen", date_issued=today - timedelta(days=1)),
        Prescription(id="P4", patient_id="F12", medication_name="Vitamin C", date_issued=today),
        Prescription(id="P5", patient_id="S67", medication_name="Gebidor", date_issued=today),
    ]


def inventory_items(now: datetime) -> list[InventoryItem]:
    return [
        InventoryItem(id=1, name="Hammer", quantity=10, date_added=now),
        InventoryItem(id=2, name="Screwdriver", quantity=15, date_added=now),
        InventoryItem(id=3, name="Pliers", quantity=8, date_added=now),
        InventoryItem(id=4, name="Wrench", quantity=5, date_added=now),
        InventoryItem(id=5, name="Drill", quantity=3, date_added=now),
    ]


def routed_transactions(now: datetime) -> list[tuple[Transaction, Channel]]:
    """The demo transactions paired with the channel each one goes through."""
    return [
        (Transaction(id=1, date=now, amount=Money.of("150"), category="Food stuff"), Channel.MOBILE_MONEY),
        (Transaction(id=2, date=now, amount=Money.of("200"), category="Electricity"), Channel.BANK_TRANSFER),
        (Transaction(id=3, date=now, amount=Money.of("300"), category="Savings"), Channel.CRYPTO),
    ]
