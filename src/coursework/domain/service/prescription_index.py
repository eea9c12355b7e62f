"""Domain service: prescriptions grouped by patient.

The index is derived once from the full prescription list. It is a
read model: adding prescriptions afterwards means building a new index.
"""

from __future__ import annotations

from typing import Iterable

from coursework.domain.model.healthcare import Prescription
from coursework.domain.service.grouping import group_by


class PrescriptionIndex:

    def __init__(self, by_patient: dict[str, list[Prescription]]) -> None:
        self._by_patient = by_patient

    @classmethod
    def build(cls, prescriptions: Iterable[Prescription]) -> PrescriptionIndex:
        return cls(group_by(prescriptions, key=lambda p: p.patient_id))

    def for_patient(self, patient_id: str) -> list[Prescription]:
        """Return the patient's prescriptions in issue order.

        An unknown patient id yields an empty list.
        """
        return list(self._by_patient.get(patient_id, []))
