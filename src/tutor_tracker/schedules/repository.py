from __future__ import annotations

from datetime import time
from typing import Protocol, Sequence

from .model import ScheduleEntry, ScheduleRow


class ScheduleRepository(Protocol):
    def create(self, *, student_id: int, day_of_week: int, start_time: time, end_time: time) -> ScheduleEntry:
        """Insert a weekly class and return it with its generated id."""

        raise NotImplementedError

    def delete(self, *, schedule_id: int) -> bool:
        raise NotImplementedError

    def delete_for_student(self, *, student_id: int) -> int:
        """Delete every class of a student. Returns number of rows removed."""

        raise NotImplementedError

    def list_for_day(self, *, day_of_week: int) -> Sequence[ScheduleRow]:
        """Classes on one day of the week joined with student name, by start time."""

        raise NotImplementedError

    def list_all(self) -> Sequence[ScheduleRow]:
        """All classes joined with student name, by day then start time."""

        raise NotImplementedError

    def count_for_day(self, *, day_of_week: int) -> int:
        raise NotImplementedError
