"""Weekly schedule conflict detection.

Classes are half-open intervals [start, end) of minutes since midnight on a
day of the week. Two classes conflict when they share the day and
``start_a < end_b and end_a > start_b``; a class ending at 10:00 and another
starting at 10:00 do not conflict.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, Protocol, TypeVar

from ..common.datetime_utils import TimeLike, format_minutes, to_minutes
from ..core.exceptions import ValidationError


class TimedEntry(Protocol):
    day_of_week: int
    start_time: TimeLike
    end_time: TimeLike


E = TypeVar("E", bound=TimedEntry)


@dataclass(frozen=True)
class ConflictResult(Generic[E]):
    has_conflict: bool
    conflict_with: Optional[E] = None


def intervals_overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return a_start < b_end and a_end > b_start


def check_conflict(
    day_of_week: int,
    proposed_start: TimeLike,
    proposed_end: TimeLike,
    existing_entries_for_day: Iterable[E],
) -> ConflictResult[E]:
    """Decide whether [proposed_start, proposed_end) may be added on day_of_week.

    Entries for other days are ignored. Candidates are scanned by
    (start, end), so when several entries overlap the earliest one is
    reported regardless of the order the store returned them in.
    """

    start = to_minutes(proposed_start)
    end = to_minutes(proposed_end)
    if start >= end:
        raise ValidationError(
            f"Start time {format_minutes(start)} must be before end time {format_minutes(end)}"
        )

    same_day = [
        (to_minutes(e.start_time), to_minutes(e.end_time), e)
        for e in existing_entries_for_day
        if int(e.day_of_week) == int(day_of_week)
    ]
    same_day.sort(key=lambda item: (item[0], item[1]))

    for existing_start, existing_end, entry in same_day:
        if intervals_overlap(start, end, existing_start, existing_end):
            return ConflictResult(has_conflict=True, conflict_with=entry)

    return ConflictResult(has_conflict=False)
