"""Tests for student record parsing and report writing."""

import pytest

from coursework.domain.exceptions import (
    InvalidScoreFormatError,
    MissingFieldError,
    StorageError,
)
from coursework.domain.model.school import Student
from coursework.infrastructure.persistence.student_records import (
    SAMPLE_RECORDS,
    format_report_line,
    parse_student_line,
    read_students,
    write_report,
    write_sample_file,
)


class TestParseStudentLine:

    def test_valid_line(self):
        student = parse_student_line("101, Kwame Mensah, 84")
        assert student == Student(id=101, full_name="Kwame Mensah", score=84)
        assert student.grade == "A"

    def test_failing_grade(self):
        assert parse_student_line("105, Yaw Agyeman, 45").grade == "F"

    def test_trailing_newline_tolerated(self):
        assert parse_student_line("102, Abena Asante, 72\n").score == 72

    def test_two_fields_rejected(self):
        with pytest.raises(MissingFieldError, match="Missing fields"):
            parse_student_line("101, Kwame Mensah")

    def test_four_fields_rejected(self):
        with pytest.raises(MissingFieldError):
            parse_student_line("101, Kwame, Mensah, 84")

    def test_non_numeric_id_rejected(self):
        with pytest.raises(MissingFieldError, match="Invalid student ID"):
            parse_student_line("abc, Kwame Mensah, 84")

    def test_non_numeric_score_rejected(self):
        with pytest.raises(InvalidScoreFormatError, match="Score format is invalid"):
            parse_student_line("101, Kwame Mensah, eighty")

    def test_decimal_score_rejected(self):
        with pytest.raises(InvalidScoreFormatError):
            parse_student_line("101, Kwame Mensah, 84.5")


class TestReadStudents:

    def test_reads_sample_file(self, tmp_path):
        path = tmp_path / "students.txt"
        write_sample_file(path)
        students = read_students(path)
        assert [s.id for s in students] == [101, 102, 103, 104, 105]
        assert [s.grade for s in students] == ["A", "B", "C", "D", "F"]

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "students.txt"
        path.write_text("101, Kwame Mensah, 84\n\n   \n102, Abena Asante, 72\n", encoding="utf-8")
        assert len(read_students(path)) == 2

    def test_error_carries_line_number(self, tmp_path):
        path = tmp_path / "students.txt"
        path.write_text("101, Kwame Mensah, 84\n102, Abena Asante\n", encoding="utf-8")
        with pytest.raises(MissingFieldError, match="Line 2"):
            read_students(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_students(tmp_path / "absent.txt")

    def test_byte_order_mark_ignored(self, tmp_path):
        path = tmp_path / "students.txt"
        path.write_bytes("101, Kwame Mensah, 84\n".encode("utf-8-sig"))
        assert read_students(path) == [Student(id=101, full_name="Kwame Mensah", score=84)]

    def test_non_utf8_file_is_a_storage_error(self, tmp_path):
        path = tmp_path / "students.txt"
        path.write_bytes("102, Ab\u00e9na Asante, 72\n".encode("latin-1"))
        with pytest.raises(StorageError, match="not UTF-8 text"):
            read_students(path)


class TestReport:

    def test_format_report_line(self):
        student = Student(id=101, full_name="Kwame Mensah", score=84)
        assert format_report_line(student) == "Kwame Mensah (ID: 101): Score = 84, Grade = A"

    def test_write_report(self, tmp_path):
        students = [parse_student_line(line) for line in SAMPLE_RECORDS]
        path = tmp_path / "report.txt"
        write_report(students, path)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "Kwame Mensah (ID: 101): Score = 84, Grade = A"
        assert lines[-1] == "Yaw Agyeman (ID: 105): Score = 45, Grade = F"
        assert len(lines) == 5
