"""Plain-text student records and the graded report.

Input: one ``id, name, score`` record per line.
Output: one ``"<name> (ID: <id>): Score = <score>, Grade = <grade>"`` per line.
"""

from __future__ import annotations

import logging
from pathlib import Path

from coursework.domain.exceptions import (
    InvalidScoreFormatError,
    MissingFieldError,
    StorageError,
)
from coursework.domain.model.school import Student

logger = logging.getLogger(__name__)

FIELD_COUNT = 3

SAMPLE_RECORDS = (
    "101, Kwame Mensah, 84",
    "102, Abena Asante, 72",
    "103, Kojo Owusu, 65",
    "104, Akosua Boateng, 58",
    "105, Yaw Agyeman, 45",
)


def parse_student_line(line: str) -> Student:
    """Parse a single ``id, name, score`` record.

    Raises MissingFieldError for a wrong field count or a non-integer id,
    InvalidScoreFormatError for a non-integer score.
    """
    parts = line.split(",")
    if len(parts) != FIELD_COUNT:
        raise MissingFieldError(
            f"Missing fields in data: expected {FIELD_COUNT}, got {len(parts)}."
        )
    raw_id, raw_name, raw_score = parts

    try:
        student_id = int(raw_id)
    except ValueError:
        raise MissingFieldError(f"Invalid student ID: {raw_id.strip()!r}.") from None

    try:
        score = int(raw_score)
    except ValueError:
        raise InvalidScoreFormatError(
            f"Score format is invalid: {raw_score.strip()!r}."
        ) from None

    return Student(id=student_id, full_name=raw_name.strip(), score=score)


def read_students(input_path: Path) -> list[Student]:
    """Parse every non-blank line of ``input_path``.

    Record errors are re-raised with the offending line number prefixed.
    A missing file raises FileNotFoundError; a file that is not UTF-8 text
    raises StorageError. A leading byte-order mark is ignored.
    """
    students: list[Student] = []
    try:
        with open(input_path, encoding="utf-8-sig") as reader:
            for line_no, line in enumerate(reader, start=1):
                if not line.strip():
                    continue
                try:
                    students.append(parse_student_line(line))
                except (MissingFieldError, InvalidScoreFormatError) as exc:
                    raise type(exc)(f"Line {line_no}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise StorageError(f"{input_path} is not UTF-8 text: {exc.reason}") from exc
    logger.debug("Read %d student record(s) from %s", len(students), input_path)
    return students


def format_report_line(student: Student) -> str:
    return (
        f"{student.full_name} (ID: {student.id}): "
        f"Score = {student.score}, Grade = {student.grade}"
    )


def write_report(students: list[Student], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as writer:
        for student in students:
            writer.write(format_report_line(student) + "\n")
    logger.info("Wrote report for %d student(s) to %s", len(students), output_path)


def write_sample_file(input_path: Path) -> None:
    input_path.parent.mkdir(parents=True, exist_ok=True)
    input_path.write_text("\n".join(SAMPLE_RECORDS) + "\n", encoding="utf-8")
