from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Sequence

from ..common.datetime_utils import month_bounds
from ..common.validators import require_positive_id, require_status
from ..core.constants import DAY_NAMES, EARLIEST_DATE
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyMarkedError, NotFoundError, ValidationError
from ..students.model import Student
from ..students.repository import StudentRepository
from .aggregator import AttendanceTally, tally
from .calendar import CalendarDay, resolve_month
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyAttendance:
    date: date
    rows: Sequence[AttendanceRow]
    stats: AttendanceTally

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "records": [r.to_dict() for r in self.rows],
            "stats": self.stats.as_dict(),
        }


@dataclass(frozen=True)
class MonthlyReport:
    student: Student
    year: int
    month: int
    days: Sequence[CalendarDay]
    stats: AttendanceTally

    def to_dict(self) -> dict:
        return {
            "student": self.student.to_dict(),
            "month": f"{self.year:04d}-{self.month:02d}",
            "days": [d.to_dict() for d in self.days],
            "stats": self.stats.as_dict(),
        }

    def csv_rows(self) -> list[dict]:
        return [
            {
                "date": d.date.strftime("%Y-%m-%d"),
                "weekday": DAY_NAMES[d.weekday],
                "status": d.status.value,
            }
            for d in self.days
        ]


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def _require_student(self, student_id: Any) -> Student:
        if student_id in (None, ""):
            raise ValidationError("Student is required")
        student = self._students.get_by_id(require_positive_id(student_id, "Student"))
        if not student:
            raise ValidationError("Student not found")
        return student

    def mark(self, *, student_id: Any, on_date: date, status: Any) -> AttendanceRecord:
        """Record attendance once per student and date.

        The existence check and the insert are separate store calls; there is
        no unique constraint behind them.
        """

        status = require_status(status)
        student = self._require_student(student_id)

        existing = self._attendance.get_for_student_and_date(student_id=student.student_id, on_date=on_date)
        if existing:
            raise AlreadyMarkedError(
                f"Attendance for {student.name} on {on_date.strftime('%Y-%m-%d')} is already recorded; edit it instead"
            )

        record = self._attendance.create(student_id=student.student_id, on_date=on_date, status=status)
        logger.info("Marked student %s as %s on %s", student.student_id, status.value, on_date)
        return record

    def update_status(self, attendance_id: Any, status: Any) -> None:
        status = require_status(status)
        if not self._attendance.update_status(
            attendance_id=require_positive_id(attendance_id, "Attendance record"), status=status
        ):
            raise NotFoundError("Attendance record not found")

    def delete(self, attendance_id: Any) -> None:
        if not self._attendance.delete(attendance_id=require_positive_id(attendance_id, "Attendance record")):
            raise NotFoundError("Attendance record not found")

    def records_for_date(self, on_date: date) -> DailyAttendance:
        rows = list(self._attendance.list_for_date(on_date=on_date))
        return DailyAttendance(date=on_date, rows=rows, stats=tally(rows))

    def monthly_report(self, *, student_id: Any, year: int, month: int) -> MonthlyReport:
        student = self._require_student(student_id)
        start, end = month_bounds(year, month)

        records = self._attendance.list_for_student_range(
            student_id=student.student_id, start_date=start, end_date=end
        )
        by_date: dict[str, AttendanceStatus] = {}
        for r in records:
            by_date[r.date.strftime("%Y-%m-%d")] = r.status

        return MonthlyReport(
            student=student,
            year=int(year),
            month=int(month),
            days=resolve_month(year, month, by_date),
            stats=tally(by_date.values()),
        )

    def reset_all(self) -> int:
        removed = self._attendance.delete_from(start_date=EARLIEST_DATE)
        logger.info("Removed all attendance records (%d)", removed)
        return removed

    def reset_student(self, student_id: Any) -> int:
        student = self._require_student(student_id)
        removed = self._attendance.delete_for_student(student_id=student.student_id)
        logger.info("Removed %d attendance records of student %s", removed, student.student_id)
        return removed
