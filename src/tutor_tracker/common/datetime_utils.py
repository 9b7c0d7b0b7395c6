from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Union

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError

TimeLike = Union[str, time, int]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month: {value!r}") from None
    return parsed.year, parsed.month


def to_minutes(value: TimeLike) -> int:
    """Normalize a time of day to minutes since midnight.

    Accepts "HH:MM" (zero padding optional), "HH:MM:SS" (seconds are
    range-checked and dropped), datetime.time, or an int already in minutes.
    """

    if isinstance(value, bool):
        raise ValidationError(f"Invalid time: {value!r}")

    if isinstance(value, int):
        minutes = value
    elif isinstance(value, time):
        minutes = value.hour * 60 + value.minute
    elif isinstance(value, str):
        parts = value.strip().split(":")
        # isdigit() alone lets through non-ASCII digits that int() rejects
        if len(parts) not in (2, 3) or not all(p.isascii() and p.isdigit() for p in parts):
            raise ValidationError(f"Invalid time: {value!r}")
        hours, mins = int(parts[0]), int(parts[1])
        secs = int(parts[2]) if len(parts) == 3 else 0
        if hours > 23 or mins > 59 or secs > 59:
            raise ValidationError(f"Invalid time: {value!r}")
        minutes = hours * 60 + mins
    else:
        raise ValidationError(f"Invalid time: {value!r}")

    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValidationError(f"Invalid time: {value!r}")
    return minutes


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def minutes_to_time(minutes: int) -> time:
    return time(hour=minutes // 60, minute=minutes % 60)


def day_of_week(value: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (value.weekday() + 1) % 7


def start_of_week(value: date) -> date:
    """Sunday on or before the given date."""
    return value - timedelta(days=day_of_week(value))


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month!r}")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return date.today()
