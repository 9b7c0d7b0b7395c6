from __future__ import annotations

from datetime import date

from tutor_tracker.attendance.aggregator import AttendanceTally, tally
from tutor_tracker.attendance.model import AttendanceRecord
from tutor_tracker.core.enums import AttendanceStatus


def _record(i: int, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(attendance_id=i, student_id=1, date=date(2026, 1, i), status=status)


def test_empty_input_is_all_zero():
    assert tally([]) == AttendanceTally()


def test_counts_each_status():
    records = [
        _record(1, AttendanceStatus.PRESENT),
        _record(2, AttendanceStatus.PRESENT),
        _record(3, AttendanceStatus.ABSENT),
        _record(4, AttendanceStatus.POSTPONED),
    ]

    result = tally(records)

    assert result.total == 4
    assert result.present == 2
    assert result.absent == 1
    assert result.excused == 0
    assert result.postponed == 1


def test_accepts_bare_statuses_and_strings():
    result = tally([AttendanceStatus.EXCUSED, "excused", "present"])
    assert result.as_dict() == {"total": 3, "present": 1, "absent": 0, "excused": 2, "postponed": 0}


def test_total_equals_sum_of_buckets():
    statuses = list(AttendanceStatus) * 3 + [AttendanceStatus.ABSENT]
    result = tally(statuses)
    assert result.total == result.present + result.absent + result.excused + result.postponed == 13


def test_three_present_two_absent():
    statuses = ["present"] * 3 + ["absent"] * 2
    result = tally(statuses)
    assert (result.total, result.present, result.absent) == (5, 3, 2)
