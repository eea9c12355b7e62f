"""Application services: patient listing and prescription lookup."""

from __future__ import annotations

from coursework.application.dto import PatientDTO, PrescriptionDTO
from coursework.domain.model.healthcare import Patient, Prescription
from coursework.domain.repository.keyed_repository import KeyedRepository
from coursework.domain.service.prescription_index import PrescriptionIndex


class ListPatientsHandler:

    def __init__(self, patient_repo: KeyedRepository[str, Patient]) -> None:
        self._patient_repo = patient_repo

    def handle(self) -> list[PatientDTO]:
        return [
            PatientDTO(id=p.id, name=p.name, age=p.age, gender=p.gender)
            for p in self._patient_repo.list_all()
        ]


class LookupPrescriptionsHandler:
    """Answers prescription queries from an index built at construction.

    Prescriptions added to the repository later are not visible until a
    new handler is built.
    """

    def __init__(
        self, prescription_repo: KeyedRepository[str, Prescription]
    ) -> None:
        self._index = PrescriptionIndex.build(prescription_repo.list_all())

    def handle(self, patient_id: str) -> list[PrescriptionDTO]:
        return [
            PrescriptionDTO(
                id=p.id,
                medication_name=p.medication_name,
                date_issued=p.date_issued.isoformat(),
            )
            for p in self._index.for_patient(patient_id.strip())
        ]
