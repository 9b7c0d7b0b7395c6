from __future__ import annotations

from datetime import date, time

from tutor_tracker.core.enums import AttendanceStatus
from tutor_tracker.dashboard.service import DashboardService


def test_summary_counts(students_repo, schedules_repo, attendance_repo, fixed_today):
    sara = students_repo.create(name="Sara")
    omar = students_repo.create(name="Omar")

    # fixed_today is Wednesday (3); the week starts on Sunday 2026-02-01.
    schedules_repo.create(student_id=sara.student_id, day_of_week=3, start_time=time(9), end_time=time(10))
    schedules_repo.create(student_id=omar.student_id, day_of_week=3, start_time=time(10), end_time=time(11))
    schedules_repo.create(student_id=omar.student_id, day_of_week=4, start_time=time(10), end_time=time(11))

    attendance_repo.create(student_id=sara.student_id, on_date=date(2026, 2, 1), status=AttendanceStatus.PRESENT)
    attendance_repo.create(student_id=omar.student_id, on_date=date(2026, 2, 3), status=AttendanceStatus.PRESENT)
    attendance_repo.create(student_id=sara.student_id, on_date=date(2026, 2, 3), status=AttendanceStatus.ABSENT)
    attendance_repo.create(student_id=sara.student_id, on_date=date(2026, 1, 31), status=AttendanceStatus.PRESENT)

    summary = DashboardService(students_repo, schedules_repo, attendance_repo).summary(fixed_today)

    assert summary.as_dict() == {"total_students": 2, "today_classes": 2, "weekly_attendance": 2}


def test_summary_of_empty_store(students_repo, schedules_repo, attendance_repo):
    summary = DashboardService(students_repo, schedules_repo, attendance_repo).summary(date(2026, 2, 1))
    assert summary.as_dict() == {"total_students": 0, "today_classes": 0, "weekly_attendance": 0}
