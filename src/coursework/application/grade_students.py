"""Application service: Grade Students use case.

Reads the student records file and writes the graded report. When the
records file does not exist yet, a sample one is written instead and no
report is produced.
"""

from __future__ import annotations

import logging
from pathlib import Path

from coursework.application.dto import GradingResultDTO
from coursework.infrastructure.persistence.student_records import (
    read_students,
    write_report,
    write_sample_file,
)

logger = logging.getLogger(__name__)


class GradeStudentsHandler:

    def handle(self, input_path: Path, output_path: Path) -> GradingResultDTO:
        if not input_path.exists():
            logger.warning("%s not found, creating a sample file", input_path)
            write_sample_file(input_path)
            return GradingResultDTO(
                input_path=str(input_path),
                output_path=str(output_path),
                sample_created=True,
            )

        students = read_students(input_path)
        write_report(students, output_path)
        return GradingResultDTO(
            input_path=str(input_path),
            output_path=str(output_path),
            sample_created=False,
            student_count=len(students),
        )
