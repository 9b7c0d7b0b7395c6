from __future__ import annotations

import logging
from typing import Sequence

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty, require_positive_id
from ..core.exceptions import NotFoundError
from ..schedules.repository import ScheduleRepository
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: register, list and remove students."""

    def __init__(
        self,
        students: StudentRepository,
        schedules: ScheduleRepository,
        attendance: AttendanceRepository,
    ):
        self._students = students
        self._schedules = schedules
        self._attendance = attendance

    def register(self, name: str) -> Student:
        name = require_non_empty(name, "Student name")
        student = self._students.create(name=name)
        logger.info("Registered student %s (%s)", student.student_id, student.name)
        return student

    def list_recent(self) -> Sequence[Student]:
        return self._students.list_all(order_by="created_at", descending=True)

    def list_by_name(self) -> Sequence[Student]:
        return self._students.list_all(order_by="name", descending=False)

    def get(self, student_id: int) -> Student:
        student = self._students.get_by_id(require_positive_id(student_id, "Student"))
        if not student:
            raise NotFoundError("Student not found")
        return student

    def count(self) -> int:
        return self._students.count()

    def delete(self, student_id: int) -> None:
        """Delete a student together with its schedule and attendance rows.

        The student row goes first: in MySQL its ON DELETE CASCADE removes the
        dependents in that same statement. The sweep afterwards only finds rows
        in stores without referential actions; if it fails there, orphaned rows
        remain but no student is left without its history.
        """

        student = self.get(student_id)

        if not self._students.delete(student_id=student.student_id):
            raise NotFoundError("Student not found")

        removed_schedules = self._schedules.delete_for_student(student_id=student.student_id)
        removed_attendance = self._attendance.delete_for_student(student_id=student.student_id)

        logger.info(
            "Deleted student %s (swept %d schedule entries, %d attendance records)",
            student.student_id,
            removed_schedules,
            removed_attendance,
        )
