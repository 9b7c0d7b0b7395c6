from __future__ import annotations

from tutor_tracker.container import build_container


def _db_config(database: str) -> dict:
    return {"host": "localhost", "port": "3307", "user": "tutor", "password": "pw", "database": database}


def test_each_container_keeps_its_own_database():
    first = build_container(db_config=_db_config("db_one"))
    second = build_container(db_config=_db_config("db_two"))

    assert first.conn is not second.conn
    assert first.conn.config.database == "db_one"
    assert second.conn.config.database == "db_two"
    assert second.conn.config.port == 3307


def test_missing_password_defaults_to_empty():
    config = _db_config("db_one")
    del config["password"]

    container = build_container(db_config=config)

    assert container.conn.config.password == ""
