from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import csv_response, login_required
from ..container import Container


def _snapshot_meta(snap) -> dict:
    return {
        "network_error": snap.network_error,
        "loaded_at": snap.loaded_at.isoformat(timespec="seconds") if snap.loaded_at else None,
    }


def register(app: Flask, container: Container) -> None:
    svc = container.presence_service

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        snap = container.data_service.ensure_loaded()
        return jsonify({**svc.board(snap.staff), **_snapshot_meta(snap)})

    @app.route("/api/refresh", methods=["POST"], endpoint="refresh")
    @login_required
    def refresh():
        snap = container.data_service.refresh()
        return jsonify(_snapshot_meta(snap))

    def _search():
        snap = container.data_service.ensure_loaded()
        return svc.status_on_date(
            snap.staff,
            snap.movements,
            day=request.args.get("date") or None,
            search_term=request.args.get("q", ""),
        )

    @app.route("/api/search", methods=["GET"], endpoint="search")
    @login_required
    def search():
        return jsonify(_search().to_dict())

    @app.route("/api/search.csv", methods=["GET"], endpoint="search_csv")
    @login_required
    def search_csv():
        report = _search()
        return csv_response(app, svc.export_csv(report), f"laporan_{report.date}.csv")
