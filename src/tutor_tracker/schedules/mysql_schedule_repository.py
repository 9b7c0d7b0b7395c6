from __future__ import annotations

from datetime import time
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import ScheduleEntry, ScheduleRow
from .repository import ScheduleRepository

_ROW_SELECT = """
    SELECT
        sc.schedule_id,
        sc.student_id,
        st.name AS student_name,
        sc.day_of_week,
        sc.start_time,
        sc.end_time
    FROM schedules sc
    JOIN students st ON st.student_id = sc.student_id
"""


def _to_row(r: dict) -> ScheduleRow:
    return ScheduleRow(
        schedule_id=int(r["schedule_id"]),
        student_id=int(r["student_id"]),
        student_name=r["student_name"],
        day_of_week=int(r["day_of_week"]),
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, student_id: int, day_of_week: int, start_time: time, end_time: time) -> ScheduleEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO schedules(student_id, day_of_week, start_time, end_time)
                VALUES(%s,%s,%s,%s)
                """,
                (int(student_id), int(day_of_week), start_time, end_time),
            )
            return ScheduleEntry(
                schedule_id=int(cur.lastrowid),
                student_id=int(student_id),
                day_of_week=int(day_of_week),
                start_time=start_time,
                end_time=end_time,
            )

    def delete(self, *, schedule_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM schedules WHERE schedule_id=%s", (int(schedule_id),))
            return cur.rowcount > 0

    def delete_for_student(self, *, student_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM schedules WHERE student_id=%s", (int(student_id),))
            return int(cur.rowcount)

    def list_for_day(self, *, day_of_week: int) -> Sequence[ScheduleRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _ROW_SELECT + " WHERE sc.day_of_week=%s ORDER BY sc.start_time ASC",
                (int(day_of_week),),
            )
            return [_to_row(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[ScheduleRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_ROW_SELECT + " ORDER BY sc.day_of_week ASC, sc.start_time ASC")
            return [_to_row(r) for r in fetchall(cur)]

    def count_for_day(self, *, day_of_week: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM schedules WHERE day_of_week=%s", (int(day_of_week),))
            r = fetchone(cur)
            return int(r["n"]) if r else 0
