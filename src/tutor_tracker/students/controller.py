from __future__ import annotations

import logging

from flask import Flask, request

from ..auth.messages import GENERIC_ERROR
from ..common.web import fail, json_body, login_required, ok
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    @login_required
    def students_list():
        try:
            if request.args.get("order") == "name":
                students = container.student_service.list_by_name()
            else:
                students = container.student_service.list_recent()
            return ok([s.to_dict() for s in students])
        except Exception:
            logger.exception("Failed to load students")
            return fail("Failed to load students", 500)

    @app.route("/api/students", methods=["POST"], endpoint="students_add")
    @login_required
    def students_add():
        try:
            data = json_body()
            student = container.student_service.register(data.get("name", ""))
            return ok(student.to_dict(), message="Student added", status=201)
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to add student")
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="students_delete")
    @login_required
    def students_delete(student_id: int):
        try:
            container.student_service.delete(student_id)
            return ok(message="Student deleted")
        except ValidationError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("Failed to delete student %s", student_id)
            return fail(GENERIC_ERROR, 500)
