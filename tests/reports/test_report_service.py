from __future__ import annotations

from datetime import date

from movement_tracker.reports.service import MovementReportService, year_choices
from movement_tracker.reports.window import month_window

from tests.fakes import make_movement, make_staff


def _data():
    staff = [make_staff("1", "Ali", position="Nazir"), make_staff("2", "Siti")]
    movements = [
        make_movement("b", "2", "2025-02-25", "2025-03-02", staff_name="Siti"),
        make_movement("a", "1", "2025-01-28", "2025-02-03"),
        make_movement("c", "1", "2025-03-10", "2025-03-11"),
    ]
    return staff, movements


def test_monthly_report_rows_and_totals():
    staff, movements = _data()
    report = MovementReportService().build_report(
        staff, movements, window=month_window(2025, 1), today=date(2025, 3, 1)
    )

    assert report.total == 2
    assert [r["id"] for r in report.rows] == ["a", "b"]
    assert [r["no"] for r in report.rows] == [1, 2]
    assert report.rows[0]["staff_name"] == "Ali"
    assert report.rows[0]["date_out_display"] == "28/01/2025"
    assert report.rows[0]["time_status"] == "SELESAI"
    assert report.rows[1]["time_status"] == "DALAM TUGAS"
    assert report.to_dict()["title"] == "Februari 2025"
    assert report.printed_on == "01/03/2025"
    assert report.staff_name is None


def test_staff_filter_and_unknown_staff_name():
    staff, movements = _data()
    svc = MovementReportService()

    mine = svc.build_report(staff, movements, window=month_window(2025, 1), staff_id="1", today=date(2025, 3, 1))
    assert [r["id"] for r in mine.rows] == ["a"]
    assert mine.staff_name == "Ali"

    ghost = svc.build_report(staff, movements, window=month_window(2025, 1), staff_id="99", today=date(2025, 3, 1))
    assert ghost.rows == []
    assert ghost.staff_name == "Staf Tidak Dikenali"


def test_export_csv():
    staff, movements = _data()
    svc = MovementReportService()
    report = svc.build_report(staff, movements, window=month_window(2025, 1), today=date(2025, 3, 1))

    lines = svc.export_csv(report).decode("utf-8-sig").strip().split("\n")
    assert len(lines) == 3
    assert lines[1].startswith('"1","Ali","Nazir","28/01/2025","03/02/2025"')


def test_year_choices():
    assert year_choices(date(2025, 6, 1)) == [2024, 2025, 2026]
