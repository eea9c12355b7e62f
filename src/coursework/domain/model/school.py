"""Student results and letter grading."""

from __future__ import annotations

from dataclasses import dataclass

# Lower bound (inclusive) of each grade, checked top to bottom.
GRADE_BANDS: tuple[tuple[int, str], ...] = (
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)
FAILING_GRADE = "F"


def grade_for(score: int) -> str:
    for lower_bound, grade in GRADE_BANDS:
        if score >= lower_bound:
            return grade
    return FAILING_GRADE


@dataclass(frozen=True)
class Student:
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        """Letter grade derived from ``score``; never stored."""
        return grade_for(self.score)
