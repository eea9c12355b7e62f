"""Unit tests for grouping and the prescription index."""

from datetime import date

from coursework.domain.model.healthcare import Prescription
from coursework.domain.service.grouping import group_by
from coursework.domain.service.prescription_index import PrescriptionIndex


def _rx(rx_id: str, patient_id: str, medication: str) -> Prescription:
    return Prescription(
        id=rx_id, patient_id=patient_id, medication_name=medication, date_issued=date(2026, 1, 15)
    )


PRESCRIPTIONS = [
    _rx("P1", "D12", "Para"),
    _rx("P2", "D12", "Vitamin D"),
    _rx("P3", "S67", "Ibuprofen"),
    _rx("P4", "F12", "Vitamin C"),
    _rx("P5", "S67", "Gebidor"),
]


class TestGroupBy:

    def test_groups_keep_member_order(self):
        groups = group_by([1, 2, 3, 4, 5, 6], key=lambda n: n % 3)
        assert groups == {1: [1, 4], 2: [2, 5], 0: [3, 6]}
        assert list(groups) == [1, 2, 0]

    def test_empty_input(self):
        assert group_by([], key=len) == {}


class TestPrescriptionIndex:

    def test_prescriptions_for_patient_in_order(self):
        index = PrescriptionIndex.build(PRESCRIPTIONS)
        assert [p.id for p in index.for_patient("S67")] == ["P3", "P5"]
        assert [p.id for p in index.for_patient("D12")] == ["P1", "P2"]

    def test_unknown_patient_yields_empty_list(self):
        index = PrescriptionIndex.build(PRESCRIPTIONS)
        assert index.for_patient("X99") == []

    def test_returned_list_is_a_copy(self):
        index = PrescriptionIndex.build(PRESCRIPTIONS)
        index.for_patient("D12").clear()
        assert len(index.for_patient("D12")) == 2
