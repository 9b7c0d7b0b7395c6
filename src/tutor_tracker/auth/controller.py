from __future__ import annotations

import logging

from flask import Flask, g, session

from ..common.web import fail, json_body, ok
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .context import SessionContext
from .messages import GENERIC_ERROR, friendly_message

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def open_session_context():
        try:
            g.auth = SessionContext(container.auth_for(session)).start()
        except Exception:
            logger.exception("Could not load the current session")
            return fail(GENERIC_ERROR, 500)

    @app.teardown_request
    def close_session_context(_exc):
        ctx = g.pop("auth", None)
        if ctx is not None:
            ctx.close()

    @app.route("/api/auth/sign-up", methods=["POST"], endpoint="sign_up")
    def sign_up():
        try:
            data = json_body()
            tutor = g.auth.client.sign_up(data.get("email", ""), data.get("password", ""))
            return ok({"email": tutor.email}, message="Account created. Please sign in.", status=201)
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthenticationError as e:
            return fail(friendly_message(e), 409)
        except Exception:
            logger.exception("Sign-up failed")
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/auth/sign-in", methods=["POST"], endpoint="sign_in")
    def sign_in():
        try:
            data = json_body()
            auth_session = g.auth.client.sign_in(data.get("email", ""), data.get("password", ""))
            return ok(auth_session.to_dict(), message="Signed in")
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthenticationError as e:
            return fail(friendly_message(e), 401)
        except Exception:
            logger.exception("Sign-in failed")
            return fail(GENERIC_ERROR, 500)

    @app.route("/api/auth/sign-out", methods=["POST"], endpoint="sign_out")
    def sign_out():
        g.auth.client.sign_out()
        return ok(message="Signed out")

    @app.route("/api/auth/session", methods=["GET"], endpoint="current_session")
    def current_session():
        current = g.auth.current
        return ok({"session": current.to_dict() if current else None})
