from __future__ import annotations

import logging

from flask import Flask

from ..common import datetime_utils
from ..common.web import fail, login_required, ok
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            summary = container.dashboard_service.summary(datetime_utils.today())
            return ok(summary.as_dict())
        except Exception:
            logger.exception("Failed to load dashboard statistics")
            return fail("Failed to load statistics", 500)
