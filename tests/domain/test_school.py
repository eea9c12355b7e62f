"""Unit tests for student grading."""

import pytest

from coursework.domain.model.school import Student, grade_for


class TestGradeBands:

    @pytest.mark.parametrize(
        "score, grade",
        [
            (100, "A"), (80, "A"),
            (79, "B"), (70, "B"),
            (69, "C"), (60, "C"),
            (59, "D"), (50, "D"),
            (49, "F"), (0, "F"),
        ],
    )
    def test_band_boundaries(self, score, grade):
        assert grade_for(score) == grade

    def test_student_grade_is_derived(self):
        assert Student(id=101, full_name="Kwame Mensah", score=84).grade == "A"
        assert Student(id=105, full_name="Yaw Agyeman", score=45).grade == "F"
