from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository

_RECORD_COLUMNS = "attendance_id, student_id, date, status, created_at, updated_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        date=r["date"],
        status=AttendanceStatus(r["status"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_student_and_date(self, *, student_id: int, on_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance
                WHERE student_id=%s AND date=%s
                ORDER BY attendance_id
                LIMIT 1
                """,
                (int(student_id), on_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(self, *, student_id: int, on_date: date, status: AttendanceStatus) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO attendance(student_id, date, status) VALUES(%s,%s,%s)",
                (int(student_id), on_date, status.value),
            )
            attendance_id = int(cur.lastrowid)
            cur.execute(
                f"SELECT {_RECORD_COLUMNS} FROM attendance WHERE attendance_id=%s",
                (attendance_id,),
            )
            return _to_record(fetchone(cur))

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET status=%s WHERE attendance_id=%s",
                (status.value, int(attendance_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0

    def delete_for_student(self, *, student_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE student_id=%s", (int(student_id),))
            return int(cur.rowcount)

    def delete_from(self, *, start_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE date >= %s", (start_date,))
            return int(cur.rowcount)

    def list_for_date(self, *, on_date: date) -> Sequence[AttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    a.attendance_id,
                    a.student_id,
                    s.name AS student_name,
                    a.date,
                    a.status,
                    a.created_at,
                    a.updated_at
                FROM attendance a
                JOIN students s ON s.student_id = a.student_id
                WHERE a.date=%s
                ORDER BY a.created_at DESC, a.attendance_id DESC
                """,
                (on_date,),
            )
            return [
                AttendanceRow(
                    attendance_id=int(r["attendance_id"]),
                    student_id=int(r["student_id"]),
                    student_name=r["student_name"],
                    date=r["date"],
                    status=AttendanceStatus(r["status"]),
                    created_at=r.get("created_at"),
                    updated_at=r.get("updated_at"),
                )
                for r in fetchall(cur)
            ]

    def list_for_student_range(self, *, student_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance
                WHERE student_id=%s AND date BETWEEN %s AND %s
                ORDER BY date ASC
                """,
                (int(student_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def count(self, *, start_date: Optional[date] = None, status: Optional[AttendanceStatus] = None) -> int:
        clauses: list[str] = []
        params: list[object] = []
        if start_date is not None:
            clauses.append("date >= %s")
            params.append(start_date)
        if status is not None:
            clauses.append("status = %s")
            params.append(status.value)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS n FROM attendance {where}", tuple(params))
            r = fetchone(cur)
            return int(r["n"]) if r else 0
