from __future__ import annotations

import logging

from flask import Flask, request

from ..auth.messages import GENERIC_ERROR
from ..common import datetime_utils
from ..common.web import fail, json_body, login_required, ok
from ..core.constants import DAY_NAMES
from ..core.exceptions import ScheduleConflictError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedules", methods=["GET"], endpoint="schedules_list")
    @login_required
    def schedules_list():
        try:
            rows = container.schedule_service.list_week()
            return ok([r.to_dict() for r in rows])
        except Exception:
            logger.exception("Failed to load schedule")
            return fail("Failed to load schedule", 500)

    @app.route("/api/schedules", methods=["POST"], endpoint="schedules_add")
    @login_required
    def schedules_add():
        try:
            data = json_body()
            entry = container.schedule_service.add(
                student_id=data.get("student_id"),
                day_of_week=data.get("day_of_week"),
                start_time=data.get("start_time"),
                end_time=data.get("end_time"),
            )
            return ok({"id": entry.schedule_id}, message="Class added to the schedule", status=201)
        except ScheduleConflictError as e:
            return fail(str(e), 409, conflict_with=e.conflict_with.to_dict())
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to add class")
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/schedules/check", methods=["POST"], endpoint="schedules_check")
    @login_required
    def schedules_check():
        try:
            data = json_body()
            result = container.schedule_service.check(
                day_of_week=data.get("day_of_week"),
                start_time=data.get("start_time"),
                end_time=data.get("end_time"),
            )
            return ok(
                {
                    "has_conflict": result.has_conflict,
                    "conflict_with": result.conflict_with.to_dict() if result.conflict_with else None,
                }
            )
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to check schedule conflicts")
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/schedules/<int:schedule_id>", methods=["DELETE"], endpoint="schedules_delete")
    @login_required
    def schedules_delete(schedule_id: int):
        try:
            container.schedule_service.delete(schedule_id)
            return ok(message="Class deleted")
        except ValidationError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("Failed to delete class %s", schedule_id)
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/classes", methods=["GET"], endpoint="daily_classes")
    @login_required
    def daily_classes():
        try:
            date_s = request.args.get("date")
            on_date = datetime_utils.parse_iso_date(date_s) if date_s else datetime_utils.today()
            rows = container.schedule_service.classes_for_date(on_date)
            day = datetime_utils.day_of_week(on_date)
            return ok(
                {
                    "date": on_date.strftime("%Y-%m-%d"),
                    "day_of_week": day,
                    "day_name": DAY_NAMES[day],
                    "classes": [r.to_dict() for r in rows],
                }
            )
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to load daily classes")
            return fail("Failed to load classes", 500)
