from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored for a student on a given date."""

    PRESENT = "present"
    ABSENT = "absent"
    EXCUSED = "excused"
    POSTPONED = "postponed"


class DayStatus(str, Enum):
    """Status of one calendar cell; NONE marks a day without a record."""

    PRESENT = "present"
    ABSENT = "absent"
    EXCUSED = "excused"
    POSTPONED = "postponed"
    NONE = "none"


class AuthEvent(str, Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
