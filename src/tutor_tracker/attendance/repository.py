from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceRow


class AttendanceRepository(Protocol):
    def get_for_student_and_date(self, *, student_id: int, on_date: date) -> Optional[AttendanceRecord]:
        """Single-row lookup; returns None when no row is found."""

        raise NotImplementedError

    def create(self, *, student_id: int, on_date: date, status: AttendanceStatus) -> AttendanceRecord:
        raise NotImplementedError

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        raise NotImplementedError

    def delete(self, *, attendance_id: int) -> bool:
        raise NotImplementedError

    def delete_for_student(self, *, student_id: int) -> int:
        raise NotImplementedError

    def delete_from(self, *, start_date: date) -> int:
        """Delete every record dated on or after start_date. Returns rows removed."""

        raise NotImplementedError

    def list_for_date(self, *, on_date: date) -> Sequence[AttendanceRow]:
        """Records of one date joined with student name, newest first."""

        raise NotImplementedError

    def list_for_student_range(self, *, student_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count(self, *, start_date: Optional[date] = None, status: Optional[AttendanceStatus] = None) -> int:
        raise NotImplementedError
