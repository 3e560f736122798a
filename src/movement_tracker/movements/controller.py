from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_user, login_required
from ..container import Container
from ..core.constants import DEFAULT_STATE, MALAYSIA_STATES
from .service import MovementForm


def _form_from_request() -> MovementForm:
    data = request.get_json(silent=True) or {}
    return MovementForm(
        date_out=str(data.get("date_out") or ""),
        date_return=str(data.get("date_return") or ""),
        location=str(data.get("location") or ""),
        purpose=str(data.get("purpose") or ""),
        state=str(data.get("state") or DEFAULT_STATE),
        time_out=data.get("time_out") or None,
        time_return=data.get("time_return") or None,
    )


def register(app: Flask, container: Container) -> None:
    svc = container.movement_service

    @app.route("/api/movements", methods=["GET"], endpoint="my_movements")
    @login_required
    def my_movements():
        return jsonify(
            {
                "movements": svc.my_movements(current_user().staff_id),
                "states": list(MALAYSIA_STATES),
            }
        )

    @app.route("/api/movements", methods=["POST"], endpoint="add_movement")
    @login_required
    def add_movement():
        user = current_user()
        created = svc.record(staff_id=user.staff_id, staff_name=user.name, form=_form_from_request())
        container.data_service.refresh()
        return jsonify({"success": True, "message": "Rekod pergerakan berjaya disimpan!", "movement": svc.to_ui(created)}), 201

    @app.route("/api/movements/<movement_id>", methods=["PUT"], endpoint="update_movement")
    @login_required
    def update_movement(movement_id: str):
        user = current_user()
        updated = svc.update(movement_id=movement_id, staff_id=user.staff_id, role=user.role, form=_form_from_request())
        container.data_service.refresh()
        return jsonify({"success": True, "message": "Rekod pergerakan berjaya dikemaskini!", "movement": svc.to_ui(updated)})

    @app.route("/api/movements/<movement_id>", methods=["DELETE"], endpoint="delete_movement")
    @login_required
    def delete_movement(movement_id: str):
        user = current_user()
        svc.delete(movement_id=movement_id, staff_id=user.staff_id, role=user.role)
        container.data_service.refresh()
        return jsonify({"success": True, "message": "Rekod berjaya dipadam."})

    @app.route("/api/admin/movements", methods=["GET"], endpoint="admin_movements")
    @admin_required
    def admin_movements():
        return jsonify({"movements": svc.all_movements(current_role=current_user().role)})
