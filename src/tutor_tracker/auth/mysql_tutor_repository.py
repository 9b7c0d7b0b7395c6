from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Tutor
from .repository import TutorRepository


def _to_tutor(r: dict) -> Tutor:
    return Tutor(
        tutor_id=int(r["tutor_id"]),
        email=r["email"],
        password_hash=r["password_hash"],
        created_at=r.get("created_at"),
    )


class MySQLTutorRepository(TutorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, tutor_id: int) -> Optional[Tutor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT tutor_id, email, password_hash, created_at FROM tutors WHERE tutor_id=%s",
                (int(tutor_id),),
            )
            r = fetchone(cur)
            return _to_tutor(r) if r else None

    def get_by_email(self, email: str) -> Optional[Tutor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT tutor_id, email, password_hash, created_at FROM tutors WHERE email=%s",
                (email,),
            )
            r = fetchone(cur)
            return _to_tutor(r) if r else None

    def create(self, *, email: str, password_hash: str) -> Tutor:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO tutors(email, password_hash) VALUES(%s,%s)",
                (email, password_hash),
            )
            return Tutor(tutor_id=int(cur.lastrowid), email=email, password_hash=password_hash)
