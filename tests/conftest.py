from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

import pytest

from tutor_tracker.attendance.model import AttendanceRecord, AttendanceRow
from tutor_tracker.auth.model import Tutor
from tutor_tracker.container import assemble_container
from tutor_tracker.core.enums import AttendanceStatus
from tutor_tracker.schedules.model import ScheduleEntry, ScheduleRow
from tutor_tracker.students.model import Student


class InMemoryStudents:
    def __init__(self):
        self.rows: dict[int, Student] = {}
        self._id = 0
        self._clock = datetime(2026, 1, 1, 9, 0, 0)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.rows.get(int(student_id))

    def create(self, *, name: str) -> Student:
        self._id += 1
        self._clock += timedelta(minutes=1)
        student = Student(student_id=self._id, name=name, created_at=self._clock)
        self.rows[self._id] = student
        return student

    def delete(self, *, student_id: int) -> bool:
        return self.rows.pop(int(student_id), None) is not None

    def list_all(self, *, order_by: str = "created_at", descending: bool = True):
        key = (lambda s: s.name) if order_by == "name" else (lambda s: s.created_at)
        return sorted(self.rows.values(), key=key, reverse=descending)

    def count(self) -> int:
        return len(self.rows)


class InMemorySchedules:
    def __init__(self, students: InMemoryStudents):
        self.students = students
        self.rows: dict[int, ScheduleEntry] = {}
        self._id = 0

    def _row(self, e: ScheduleEntry) -> ScheduleRow:
        student = self.students.get_by_id(e.student_id)
        return ScheduleRow(
            schedule_id=e.schedule_id,
            student_id=e.student_id,
            student_name=student.name if student else "?",
            day_of_week=e.day_of_week,
            start_time=e.start_time,
            end_time=e.end_time,
        )

    def create(self, *, student_id: int, day_of_week: int, start_time: time, end_time: time) -> ScheduleEntry:
        self._id += 1
        entry = ScheduleEntry(
            schedule_id=self._id,
            student_id=int(student_id),
            day_of_week=int(day_of_week),
            start_time=start_time,
            end_time=end_time,
        )
        self.rows[self._id] = entry
        return entry

    def delete(self, *, schedule_id: int) -> bool:
        return self.rows.pop(int(schedule_id), None) is not None

    def delete_for_student(self, *, student_id: int) -> int:
        ids = [k for k, v in self.rows.items() if v.student_id == int(student_id)]
        for k in ids:
            del self.rows[k]
        return len(ids)

    def list_for_day(self, *, day_of_week: int):
        items = [self._row(e) for e in self.rows.values() if e.day_of_week == int(day_of_week)]
        return sorted(items, key=lambda r: r.start_time)

    def list_all(self):
        return sorted((self._row(e) for e in self.rows.values()), key=lambda r: (r.day_of_week, r.start_time))

    def count_for_day(self, *, day_of_week: int) -> int:
        return sum(1 for e in self.rows.values() if e.day_of_week == int(day_of_week))


class InMemoryAttendance:
    def __init__(self, students: InMemoryStudents):
        self.students = students
        self.rows: dict[int, AttendanceRecord] = {}
        self._id = 0
        self._clock = datetime(2026, 1, 1, 12, 0, 0)

    def get_for_student_and_date(self, *, student_id: int, on_date: date) -> Optional[AttendanceRecord]:
        for r in self.rows.values():
            if r.student_id == int(student_id) and r.date == on_date:
                return r
        return None

    def create(self, *, student_id: int, on_date: date, status: AttendanceStatus) -> AttendanceRecord:
        self._id += 1
        self._clock += timedelta(minutes=1)
        rec = AttendanceRecord(
            attendance_id=self._id,
            student_id=int(student_id),
            date=on_date,
            status=status,
            created_at=self._clock,
            updated_at=self._clock,
        )
        self.rows[self._id] = rec
        return rec

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        rec = self.rows.get(int(attendance_id))
        if not rec:
            return False
        self._clock += timedelta(minutes=1)
        self.rows[rec.attendance_id] = AttendanceRecord(
            attendance_id=rec.attendance_id,
            student_id=rec.student_id,
            date=rec.date,
            status=status,
            created_at=rec.created_at,
            updated_at=self._clock,
        )
        return True

    def delete(self, *, attendance_id: int) -> bool:
        return self.rows.pop(int(attendance_id), None) is not None

    def delete_for_student(self, *, student_id: int) -> int:
        ids = [k for k, v in self.rows.items() if v.student_id == int(student_id)]
        for k in ids:
            del self.rows[k]
        return len(ids)

    def delete_from(self, *, start_date: date) -> int:
        ids = [k for k, v in self.rows.items() if v.date >= start_date]
        for k in ids:
            del self.rows[k]
        return len(ids)

    def list_for_date(self, *, on_date: date):
        out = []
        for r in self.rows.values():
            if r.date != on_date:
                continue
            student = self.students.get_by_id(r.student_id)
            out.append(
                AttendanceRow(
                    attendance_id=r.attendance_id,
                    student_id=r.student_id,
                    student_name=student.name if student else "?",
                    date=r.date,
                    status=r.status,
                    created_at=r.created_at,
                    updated_at=r.updated_at,
                )
            )
        return sorted(out, key=lambda r: r.created_at, reverse=True)

    def list_for_student_range(self, *, student_id: int, start_date: date, end_date: date):
        items = [
            r
            for r in self.rows.values()
            if r.student_id == int(student_id) and start_date <= r.date <= end_date
        ]
        return sorted(items, key=lambda r: r.date)

    def count(self, *, start_date: Optional[date] = None, status: Optional[AttendanceStatus] = None) -> int:
        return sum(
            1
            for r in self.rows.values()
            if (start_date is None or r.date >= start_date) and (status is None or r.status == status)
        )


class InMemoryTutors:
    def __init__(self):
        self.rows: dict[int, Tutor] = {}
        self._id = 0

    def get_by_id(self, tutor_id: int) -> Optional[Tutor]:
        return self.rows.get(int(tutor_id))

    def get_by_email(self, email: str) -> Optional[Tutor]:
        for t in self.rows.values():
            if t.email == email:
                return t
        return None

    def create(self, *, email: str, password_hash: str) -> Tutor:
        self._id += 1
        tutor = Tutor(tutor_id=self._id, email=email, password_hash=password_hash)
        self.rows[self._id] = tutor
        return tutor


@pytest.fixture
def students_repo():
    return InMemoryStudents()


@pytest.fixture
def schedules_repo(students_repo):
    return InMemorySchedules(students_repo)


@pytest.fixture
def attendance_repo(students_repo):
    return InMemoryAttendance(students_repo)


@pytest.fixture
def tutors_repo():
    return InMemoryTutors()


@pytest.fixture
def container(students_repo, schedules_repo, attendance_repo, tutors_repo):
    return assemble_container(
        students_repo=students_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        tutors_repo=tutors_repo,
    )


@pytest.fixture
def fixed_today():
    # A Wednesday.
    return date(2026, 2, 4)


@pytest.fixture
def app(container, monkeypatch, fixed_today):
    from tutor_tracker.common import datetime_utils
    from tutor_tracker.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(datetime_utils, "today", lambda: fixed_today)
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    """Test client with a signed-in tutor."""

    resp = client.post("/api/auth/sign-up", json={"email": "tutor@example.com", "password": "secret123"})
    assert resp.status_code == 201
    resp = client.post("/api/auth/sign-in", json={"email": "tutor@example.com", "password": "secret123"})
    assert resp.status_code == 200
    return client
