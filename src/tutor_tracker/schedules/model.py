from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..core.constants import DAY_NAMES


def _hhmm(value: time) -> str:
    return value.strftime("%H:%M")


@dataclass(frozen=True)
class ScheduleEntry:
    """Domain entity: one weekly recurring class.

    The class occupies the half-open interval [start_time, end_time) every
    week on day_of_week (0 = Sunday).
    """

    schedule_id: int
    student_id: int
    day_of_week: int
    start_time: time
    end_time: time


@dataclass(frozen=True)
class ScheduleRow:
    """Read-model: schedule entry joined with the owning student's name."""

    schedule_id: int
    student_id: int
    student_name: str
    day_of_week: int
    start_time: time
    end_time: time

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week]

    def to_dict(self) -> dict:
        return {
            "id": self.schedule_id,
            "student_id": self.student_id,
            "student_name": self.student_name,
            "day_of_week": self.day_of_week,
            "day_name": self.day_name,
            "start_time": _hhmm(self.start_time),
            "end_time": _hhmm(self.end_time),
        }
