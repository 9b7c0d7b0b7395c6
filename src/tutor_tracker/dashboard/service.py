from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import day_of_week, start_of_week
from ..core.enums import AttendanceStatus
from ..schedules.repository import ScheduleRepository
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class DashboardSummary:
    total_students: int
    today_classes: int
    weekly_attendance: int

    def as_dict(self) -> dict:
        return asdict(self)


class DashboardService:
    """Count-only queries behind the home page."""

    def __init__(
        self,
        students: StudentRepository,
        schedules: ScheduleRepository,
        attendance: AttendanceRepository,
    ):
        self._students = students
        self._schedules = schedules
        self._attendance = attendance

    def summary(self, today: date) -> DashboardSummary:
        return DashboardSummary(
            total_students=self._students.count(),
            today_classes=self._schedules.count_for_day(day_of_week=day_of_week(today)),
            weekly_attendance=self._attendance.count(
                start_date=start_of_week(today), status=AttendanceStatus.PRESENT
            ),
        )
