"""Flask helpers shared by the feature controllers."""
from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from ..staff.session import SessionUser, load_session

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def current_user() -> SessionUser:
    return g.current_user


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = load_session(session)
        if user is None:
            return error_response("Sila log masuk untuk meneruskan.", 401)
        g.current_user = user
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = load_session(session)
        if user is None:
            return error_response("Sila log masuk untuk meneruskan.", 401)
        if not user.is_admin:
            return error_response("Anda tiada kebenaran.", 403)
        g.current_user = user
        return view(*args, **kwargs)

    return wrapper


def csv_response(app: Flask, payload: bytes, filename: str):
    return app.response_class(
        payload,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        for cls, status in _STATUS_BY_ERROR:
            if isinstance(e, cls):
                return error_response(str(e), status)
        return error_response(str(e), 400)

    @app.errorhandler(StoreError)
    def _store_error(e: StoreError):
        logger.error("Store unavailable: %s", e)
        return error_response("Gagal menghubungi pangkalan data. Sila cuba lagi.", 503)
