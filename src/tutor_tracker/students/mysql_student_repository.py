from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

_ORDER_COLUMNS = {"created_at": "created_at", "name": "name"}


def _to_student(r: dict) -> Student:
    return Student(student_id=int(r["student_id"]), name=r["name"], created_at=r.get("created_at"))


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT student_id, name, created_at FROM students WHERE student_id=%s",
                (int(student_id),),
            )
            r = fetchone(cur)
            return _to_student(r) if r else None

    def create(self, *, name: str) -> Student:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO students(name) VALUES(%s)", (name,))
            student_id = int(cur.lastrowid)
            cur.execute(
                "SELECT student_id, name, created_at FROM students WHERE student_id=%s",
                (student_id,),
            )
            return _to_student(fetchone(cur))

    def delete(self, *, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (int(student_id),))
            return cur.rowcount > 0

    def list_all(self, *, order_by: str = "created_at", descending: bool = True) -> Sequence[Student]:
        column = _ORDER_COLUMNS.get(order_by, "created_at")
        direction = "DESC" if descending else "ASC"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT student_id, name, created_at FROM students ORDER BY {column} {direction}, student_id {direction}"
            )
            return [_to_student(r) for r in fetchall(cur)]

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM students")
            r = fetchone(cur)
            return int(r["n"]) if r else 0
