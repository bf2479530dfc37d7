from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def ok(status: int = 200, **payload):
    return jsonify({"success": True, **payload}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def first_of(data: dict, *keys, default=None):
    """First present key; request bodies may use snake_case or camelCase."""

    for key in keys:
        if key in data:
            return data[key]
    return default


def api_errors(action: str):
    """Translate domain errors into JSON responses for a view."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return fail(str(e), 400)
            except NotFoundError as e:
                return fail(str(e), 404)
            except Exception as e:
                logger.exception("Unexpected error while trying to %s", action)
                if bool(current_app.config.get("DEBUG", False)):
                    return fail(f"System error while trying to {action}: {e}", 500)
                return fail(f"System error while trying to {action}", 500)

        return wrapper

    return decorator
