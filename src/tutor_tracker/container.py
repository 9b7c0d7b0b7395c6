from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.client import AuthClient
from .auth.mysql_tutor_repository import MySQLTutorRepository
from .auth.repository import TutorRepository
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    schedules_repo: ScheduleRepository
    attendance_repo: AttendanceRepository
    tutors_repo: TutorRepository

    student_service: StudentService
    schedule_service: ScheduleService
    attendance_service: AttendanceService
    dashboard_service: DashboardService

    conn: Optional[DatabaseConnection] = None

    def auth_for(self, storage: MutableMapping[str, Any]) -> AuthClient:
        """Auth client bound to one browser session's storage."""
        return AuthClient(self.tutors_repo, storage)


def assemble_container(
    *,
    students_repo: StudentRepository,
    schedules_repo: ScheduleRepository,
    attendance_repo: AttendanceRepository,
    tutors_repo: TutorRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        students_repo=students_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        tutors_repo=tutors_repo,
        student_service=StudentService(students_repo, schedules_repo, attendance_repo),
        schedule_service=ScheduleService(schedules_repo, students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        dashboard_service=DashboardService(students_repo, schedules_repo, attendance_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_settings(db_config))

    return assemble_container(
        students_repo=MySQLStudentRepository(conn),
        schedules_repo=MySQLScheduleRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        tutors_repo=MySQLTutorRepository(conn),
        conn=conn,
    )
