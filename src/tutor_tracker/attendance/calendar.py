from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Mapping

from ..common.datetime_utils import day_of_week, month_bounds
from ..core.enums import DayStatus


@dataclass(frozen=True)
class CalendarDay:
    day: int
    date: date
    weekday: int
    status: DayStatus

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "date": self.date.strftime("%Y-%m-%d"),
            "weekday": self.weekday,
            "status": self.status.value,
        }


def _date_key(value: Any) -> str:
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _day_status(value: Any) -> DayStatus:
    raw = getattr(value, "value", value)
    try:
        return DayStatus(str(raw))
    except ValueError:
        return DayStatus.NONE


def resolve_month(year: int, month: int, statuses: Mapping[Any, Any]) -> list[CalendarDay]:
    """One status per day of the month; days without a record resolve to NONE."""

    by_key = {_date_key(k): v for k, v in statuses.items()}
    first, last = month_bounds(year, month)

    days: list[CalendarDay] = []
    current = first
    while current <= last:
        key = f"{current.year:04d}-{current.month:02d}-{current.day:02d}"
        status = _day_status(by_key[key]) if key in by_key else DayStatus.NONE
        days.append(CalendarDay(day=current.day, date=current, weekday=day_of_week(current), status=status))
        current += timedelta(days=1)
    return days
