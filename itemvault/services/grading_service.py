"""Grading service - reads student results and writes grade reports."""

import logging
from pathlib import Path
from typing import List

from itemvault.errors import MalformedRecordError
from itemvault.models.domain import Student

logger = logging.getLogger(__name__)

FIELD_COUNT = 3


class GradingService:
    """
    Service for the student grading file format.

    Input lines are ``id,name,score``. The first bad line aborts the whole
    read, so callers never see a partial list.
    """

    def read_students_from_file(self, input_path: Path) -> List[Student]:
        """Parse every line of the input file.

        Raises:
            FileNotFoundError: If the input file doesn't exist
            MalformedRecordError: On a wrong field count or a non-integer
                id or score, with the 1-based line number
        """
        students = []

        with open(input_path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                students.append(self.parse_line(line.rstrip("\r\n"), line_number))

        logger.debug("Read %d students from %s", len(students), input_path)
        return students

    @staticmethod
    def parse_line(line: str, line_number: int) -> Student:
        """Parse one ``id,name,score`` line."""
        parts = line.split(",")
        if len(parts) != FIELD_COUNT:
            raise MalformedRecordError(
                line_number, f"Expected {FIELD_COUNT} fields but got {len(parts)}"
            )

        raw_id, raw_name, raw_score = (part.strip() for part in parts)

        try:
            student_id = int(raw_id)
        except ValueError:
            raise MalformedRecordError(line_number, f"Invalid ID format '{raw_id}'") from None

        try:
            score = int(raw_score)
        except ValueError:
            raise MalformedRecordError(
                line_number, f"Score '{raw_score}' is not a valid number"
            ) from None

        return Student(id=student_id, full_name=raw_name, score=score)

    @staticmethod
    def format_summary(student: Student) -> str:
        return (
            f"{student.full_name} (ID: {student.id}): "
            f"Score = {student.score}, Grade = {student.grade}"
        )

    def write_report(self, students: List[Student], output_path: Path) -> None:
        """Write one summary line per student."""
        with open(output_path, "w", encoding="utf-8") as f:
            for student in students:
                f.write(self.format_summary(student) + "\n")

    def process(self, input_path: Path, output_path: Path) -> List[Student]:
        """Read the input file and write the report.

        Nothing is written when the read fails.
        """
        students = self.read_students_from_file(input_path)
        self.write_report(students, output_path)
        return students
