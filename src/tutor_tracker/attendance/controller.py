from __future__ import annotations

import csv
import io
import logging

from flask import Flask, request

from ..auth.messages import GENERIC_ERROR
from ..common import datetime_utils
from ..common.web import fail, json_body, login_required, ok
from ..core.exceptions import AlreadyMarkedError, NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _date_arg(value):
        return datetime_utils.parse_iso_date(value) if value else datetime_utils.today()

    def _month_args():
        month_s = request.args.get("month")
        if month_s:
            return datetime_utils.parse_month(month_s)
        current = datetime_utils.today()
        return current.year, current.month

    def _write_report_csv(*, rows: list[dict], filename: str):
        """Write calendar rows to a CSV attachment."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["date", "weekday", "status"])
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_for_date")
    @login_required
    def attendance_for_date():
        try:
            daily = container.attendance_service.records_for_date(_date_arg(request.args.get("date")))
            return ok(daily.to_dict())
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to load attendance")
            return fail("Failed to load attendance records", 500)

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    @login_required
    def attendance_mark():
        try:
            data = json_body()
            record = container.attendance_service.mark(
                student_id=data.get("student_id"),
                on_date=_date_arg(data.get("date")),
                status=data.get("status"),
            )
            return ok(
                {
                    "id": record.attendance_id,
                    "student_id": record.student_id,
                    "date": record.date.strftime("%Y-%m-%d"),
                    "status": record.status.value,
                },
                message="Attendance recorded",
                status=201,
            )
        except AlreadyMarkedError as e:
            return fail(str(e), 409)
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to mark attendance")
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/attendance/<int:attendance_id>", methods=["PATCH"], endpoint="attendance_update")
    @login_required
    def attendance_update(attendance_id: int):
        try:
            data = json_body()
            container.attendance_service.update_status(attendance_id, data.get("status"))
            return ok(message="Attendance updated")
        except NotFoundError as e:
            return fail(str(e), 404)
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to update attendance %s", attendance_id)
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    @login_required
    def attendance_delete(attendance_id: int):
        try:
            container.attendance_service.delete(attendance_id)
            return ok(message="Attendance record deleted")
        except ValidationError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("Failed to delete attendance %s", attendance_id)
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/attendance", methods=["DELETE"], endpoint="attendance_reset")
    @login_required
    def attendance_reset():
        """Bulk delete: one student's records (?student_id=) or everything (?all=1)."""

        try:
            student_id = request.args.get("student_id")
            if student_id:
                removed = container.attendance_service.reset_student(student_id)
            elif request.args.get("all") in {"1", "true"}:
                removed = container.attendance_service.reset_all()
            else:
                raise ValidationError("Choose a student or confirm deleting all records")
            return ok({"removed": removed}, message="Attendance records deleted")
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to reset attendance")
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="monthly_report")
    @login_required
    def monthly_report():
        try:
            year, month = _month_args()
            report = container.attendance_service.monthly_report(
                student_id=request.args.get("student_id"), year=year, month=month
            )
            return ok(report.to_dict())
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to build monthly report")
            return fail("Failed to load attendance records", 500)

    @app.route("/api/reports/monthly.csv", methods=["GET"], endpoint="monthly_report_csv")
    @login_required
    def monthly_report_csv():
        try:
            year, month = _month_args()
            report = container.attendance_service.monthly_report(
                student_id=request.args.get("student_id"), year=year, month=month
            )
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Failed to export monthly report")
            return fail(GENERIC_ERROR, 500)

        filename = f"attendance_{report.student.student_id}_{year:04d}{month:02d}.csv"
        return _write_report_csv(rows=report.csv_rows(), filename=filename)
