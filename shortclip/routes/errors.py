import logging
from functools import wraps

from flask import jsonify
from werkzeug.exceptions import HTTPException

from shortclip.db import db
from shortclip.services.errors import ForbiddenError, NotFoundError


logger = logging.getLogger(__name__)


def service_errors(failure_message: str, log_prefix: str):
    """Translate service exceptions into ``{"error": ...}`` responses.

    Lookup failures map to 404, ownership failures to 403 and validation
    failures (``ValueError``) to 400. Anything else rolls back the session,
    is logged under ``log_prefix`` and answers 500 with ``failure_message``.
    """
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except ForbiddenError as e:
                return jsonify({"error": str(e)}), 403
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            except HTTPException:
                raise
            except Exception:
                db.session.rollback()
                logger.exception("%s error", log_prefix)
                return jsonify({"error": failure_message}), 500

        return wrapper

    return decorator
