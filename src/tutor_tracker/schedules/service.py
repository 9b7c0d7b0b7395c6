from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import day_of_week as weekday_of, format_minutes, minutes_to_time, to_minutes
from ..common.validators import require_day_of_week, require_positive_id
from ..core.constants import DAY_NAMES
from ..core.exceptions import NotFoundError, ScheduleConflictError, ValidationError
from ..students.repository import StudentRepository
from .conflicts import ConflictResult, check_conflict
from .model import ScheduleEntry, ScheduleRow
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    """Use case: maintain the tutor's weekly class schedule.

    Adding a class is check-then-act against the store: the day's classes are
    read fresh, checked for overlap, then the new class is inserted in a
    separate call. Two concurrent submissions can both pass the check and
    leave overlapping classes behind; closing that gap needs an exclusion
    constraint or a serializable transaction in the store.
    """

    def __init__(self, schedules: ScheduleRepository, students: Optional[StudentRepository] = None):
        self._schedules = schedules
        self._students = students

    def _validate_range(self, start_time: Any, end_time: Any) -> tuple[int, int]:
        if start_time in (None, "") or end_time in (None, ""):
            raise ValidationError("Start and end time are required")
        start = to_minutes(start_time)
        end = to_minutes(end_time)
        if start >= end:
            raise ValidationError("Start time must be before end time")
        return start, end

    def check(self, *, day_of_week: Any, start_time: Any, end_time: Any) -> ConflictResult[ScheduleRow]:
        day = require_day_of_week(day_of_week)
        start, end = self._validate_range(start_time, end_time)
        existing = self._schedules.list_for_day(day_of_week=day)
        return check_conflict(day, start, end, existing)

    def add(self, *, student_id: Any, day_of_week: Any, start_time: Any, end_time: Any) -> ScheduleEntry:
        if student_id in (None, ""):
            raise ValidationError("Student is required")
        student_id = require_positive_id(student_id, "Student")
        day = require_day_of_week(day_of_week)
        start, end = self._validate_range(start_time, end_time)

        if self._students is not None and self._students.get_by_id(student_id) is None:
            raise ValidationError("Student not found")

        result = check_conflict(day, start, end, self._schedules.list_for_day(day_of_week=day))
        if result.has_conflict:
            other = result.conflict_with
            raise ScheduleConflictError(
                f"Conflicts with {other.student_name} on {DAY_NAMES[day]} "
                f"{other.start_time.strftime('%H:%M')}-{other.end_time.strftime('%H:%M')}",
                conflict_with=other,
            )

        entry = self._schedules.create(
            student_id=student_id,
            day_of_week=day,
            start_time=minutes_to_time(start),
            end_time=minutes_to_time(end),
        )
        logger.info(
            "Scheduled student %s on %s %s-%s",
            student_id,
            DAY_NAMES[day],
            format_minutes(start),
            format_minutes(end),
        )
        return entry

    def delete(self, schedule_id: Any) -> None:
        if not self._schedules.delete(schedule_id=require_positive_id(schedule_id, "Class")):
            raise NotFoundError("Class not found")

    def list_week(self) -> Sequence[ScheduleRow]:
        return self._schedules.list_all()

    def classes_for_date(self, on_date: date) -> Sequence[ScheduleRow]:
        return self._schedules.list_for_day(day_of_week=weekday_of(on_date))

    def count_for_day(self, day_of_week: int) -> int:
        return self._schedules.count_for_day(day_of_week=require_day_of_week(day_of_week))
