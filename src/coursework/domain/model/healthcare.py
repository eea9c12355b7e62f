"""Clinic records: patients and the prescriptions issued to them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Patient:
    id: str
    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class Prescription:
    """A medication issued to a patient.

    ``patient_id`` refers to ``Patient.id``; it is not checked against the
    patient store.
    """

    id: str
    patient_id: str
    medication_name: str
    date_issued: date
