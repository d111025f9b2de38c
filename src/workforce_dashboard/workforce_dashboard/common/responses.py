from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify

from ..core.exceptions import NotFoundError, PersistenceError, SaveInProgressError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any = None, status: int = 200, message: str = ""):
    return jsonify({"success": True, "data": data, "message": message}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "data": None, "message": message}), status


def json_errors(view):
    """Translate domain errors raised by a view into the JSON envelope."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except SaveInProgressError as e:
            return fail(str(e), 409)
        except PersistenceError as e:
            logger.error("%s", e, exc_info=e.__cause__)
            return fail(str(e), 502)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return fail("Internal server error", 500)

    return wrapper
