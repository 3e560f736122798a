from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.web import csv_response, login_required
from ..container import Container
from ..core.constants import ALL_STAFF, MONTH_NAMES
from ..core.exceptions import ValidationError
from .service import year_choices
from .window import ReportWindow, month_window, range_window


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValidationError(f"Parameter {name} tidak sah") from e


def register(app: Flask, container: Container) -> None:
    svc = container.report_service

    def _monthly_window() -> ReportWindow:
        today = now_local(container.tz).date()
        return month_window(_int_arg("year", today.year), _int_arg("month", today.month - 1))

    def _range_window() -> ReportWindow:
        start = request.args.get("start")
        end = request.args.get("end")
        if not start or not end:
            raise ValidationError("Parameter start/end diperlukan")
        return range_window(start, end)

    def _build(window: ReportWindow):
        snap = container.data_service.ensure_loaded()
        return svc.build_report(
            snap.staff,
            snap.movements,
            window=window,
            staff_id=request.args.get("staff_id") or ALL_STAFF,
        )

    @app.route("/api/reports/options", methods=["GET"], endpoint="report_options")
    @login_required
    def report_options():
        snap = container.data_service.ensure_loaded()
        return jsonify(
            {
                "years": year_choices(now_local(container.tz).date()),
                "months": [{"index": i, "name": n} for i, n in enumerate(MONTH_NAMES)],
                "staff": [{"id": s.staff_id, "name": s.name} for s in snap.staff],
            }
        )

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="report_monthly")
    @login_required
    def report_monthly():
        return jsonify(_build(_monthly_window()).to_dict())

    @app.route("/api/reports/monthly.csv", methods=["GET"], endpoint="report_monthly_csv")
    @login_required
    def report_monthly_csv():
        window = _monthly_window()
        filename = f"laporan_{window.start[:7]}.csv"
        return csv_response(app, svc.export_csv(_build(window)), filename)

    @app.route("/api/reports/range", methods=["GET"], endpoint="report_range")
    @login_required
    def report_range():
        return jsonify(_build(_range_window()).to_dict())

    @app.route("/api/reports/range.csv", methods=["GET"], endpoint="report_range_csv")
    @login_required
    def report_range_csv():
        window = _range_window()
        filename = f"laporan_{window.start.replace('-', '')}_{window.end.replace('-', '')}.csv"
        return csv_response(app, svc.export_csv(_build(window)), filename)
