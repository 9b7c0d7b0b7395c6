from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Any, Iterable

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceTally:
    total: int = 0
    present: int = 0
    absent: int = 0
    excused: int = 0
    postponed: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


def _status_of(record: Any) -> str:
    status = getattr(record, "status", record)
    return status.value if isinstance(status, AttendanceStatus) else str(status)


def tally(records: Iterable[Any]) -> AttendanceTally:
    """Count records by status.

    Records may be AttendanceRecord/AttendanceRow objects or bare statuses.
    The time window is whatever the caller queried; nothing is filtered here.
    """

    statuses = [_status_of(r) for r in records]
    counts = Counter(statuses)
    return AttendanceTally(
        total=len(statuses),
        present=counts[AttendanceStatus.PRESENT.value],
        absent=counts[AttendanceStatus.ABSENT.value],
        excused=counts[AttendanceStatus.EXCUSED.value],
        postponed=counts[AttendanceStatus.POSTPONED.value],
    )
