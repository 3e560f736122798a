from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..common.web import admin_required, current_user, error_response, login_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, StoreError, ValidationError
from .session import SessionUser, clear_session, load_session, save_session

logger = logging.getLogger(__name__)


def _staff_dict(s) -> dict:
    return {
        "id": s.staff_id,
        "name": s.name,
        "position": s.position,
        "username": s.username,
        "role": s.role.value,
        "status": s.current_status.value,
        "rank": s.rank,
    }


def _parse_role(value) -> Role:
    try:
        return Role(value)
    except ValueError as e:
        raise ValidationError("Peranan tidak sah") from e


def register(app: Flask, container: Container) -> None:
    def _refresh_after_write() -> None:
        container.data_service.refresh()

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except AuthenticationError as e:
            return error_response(str(e), 401)
        except StoreError:
            logger.error("Login failed: store unreachable", exc_info=True)
            return error_response("Ralat sambungan. Sila cuba guna Hotspot.", 503)

        save_session(session, user)
        container.data_service.ensure_loaded()
        return jsonify({"success": True, "user": user.to_dict(), "views": [v.value for v in user.views]})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        clear_session(session)
        return jsonify({"success": True})

    @app.route("/api/session", methods=["GET"], endpoint="session_info")
    def session_info():
        user = load_session(session)
        if user is None:
            return jsonify({"authenticated": False})
        return jsonify({"authenticated": True, "user": user.to_dict(), "views": [v.value for v in user.views]})

    @app.route("/api/profile", methods=["PUT"], endpoint="update_profile")
    @login_required
    def update_profile():
        data = request.get_json(silent=True) or {}
        user = current_user()
        updated = container.staff_service.update_profile(
            staff_id=user.staff_id,
            name=data.get("name", ""),
            position=data.get("position", ""),
            password=data.get("password", ""),
            confirm_password=data.get("confirm_password", ""),
        )
        # Keep the session in step so a reload does not show the old name.
        save_session(session, SessionUser.from_staff(updated))
        _refresh_after_write()
        return jsonify({"success": True, "message": "Profil berjaya dikemaskini!", "staff": _staff_dict(updated)})

    @app.route("/api/admin/staff", methods=["GET"], endpoint="admin_staff")
    @admin_required
    def admin_staff():
        return jsonify({"staff": [_staff_dict(s) for s in container.staff_service.list_staff()]})

    @app.route("/api/admin/staff", methods=["POST"], endpoint="admin_add_staff")
    @admin_required
    def admin_add_staff():
        data = request.get_json(silent=True) or {}
        created = container.staff_service.create_staff(
            current_role=current_user().role,
            name=data.get("name", ""),
            position=data.get("position", ""),
            username=data.get("username", ""),
            password=data.get("password", ""),
            role=_parse_role(data.get("role", Role.STAFF.value)),
        )
        _refresh_after_write()
        return jsonify({"success": True, "staff": _staff_dict(created)}), 201

    @app.route("/api/admin/staff/<staff_id>", methods=["PUT"], endpoint="admin_update_staff")
    @admin_required
    def admin_update_staff(staff_id: str):
        data = request.get_json(silent=True) or {}
        rank = data.get("rank")
        try:
            rank = int(rank) if rank not in (None, "") else None
        except (TypeError, ValueError) as e:
            raise ValidationError("Kedudukan mesti nombor") from e

        updated = container.staff_service.update_staff(
            current_role=current_user().role,
            staff_id=staff_id,
            name=data.get("name"),
            position=data.get("position"),
            username=data.get("username"),
            password=data.get("password"),
            role=_parse_role(data["role"]) if data.get("role") else None,
            rank=rank,
        )
        _refresh_after_write()
        return jsonify({"success": True, "staff": _staff_dict(updated)})

    @app.route("/api/admin/staff/<staff_id>", methods=["DELETE"], endpoint="admin_delete_staff")
    @admin_required
    def admin_delete_staff(staff_id: str):
        user = current_user()
        container.staff_service.delete_staff(current_role=user.role, current_staff_id=user.staff_id, staff_id=staff_id)
        _refresh_after_write()
        return jsonify({"success": True})
