from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import g, jsonify, request

from ..core.exceptions import ValidationError


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200):
    body: dict = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def fail(message: str, status: int = 400, **extra: Any):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = getattr(g, "auth", None)
        if ctx is None or not ctx.is_authenticated:
            return fail("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper
