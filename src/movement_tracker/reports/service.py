from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Optional, Sequence

from ..common.csv_export import to_csv_bytes
from ..common.datetime_utils import format_display_date, normalize_date, now_local
from ..core.constants import ALL_STAFF, UNKNOWN_STAFF_NAME
from ..movements.model import Movement
from ..movements.time_status import classify_movement
from ..staff.model import Staff
from .overlap import filter_by_window
from .window import ReportWindow

REPORT_CSV_HEADERS = (
    "Bil",
    "Nama Pegawai",
    "Jawatan",
    "Tarikh Keluar",
    "Tarikh Balik",
    "Lokasi",
    "Tujuan",
    "Status",
)


@dataclass(frozen=True)
class ReportData:
    window: ReportWindow
    staff_id: str
    staff_name: Optional[str]
    printed_on: str
    rows: list[dict]

    @property
    def total(self) -> int:
        return len(self.rows)

    def to_dict(self) -> dict:
        return {
            "title": self.window.title,
            "start": self.window.start,
            "end": self.window.end,
            "staff_id": self.staff_id,
            "staff_name": self.staff_name,
            "printed_on": self.printed_on,
            "total": self.total,
            "rows": self.rows,
        }


def year_choices(today: Optional[date] = None) -> list[int]:
    year = (today or now_local().date()).year
    return [year - 1, year, year + 1]


class MovementReportService:
    def __init__(self, *, tz: Optional[tzinfo] = None):
        self._tz = tz

    def build_report(
        self,
        staff_list: Sequence[Staff],
        movements: Sequence[Movement],
        *,
        window: ReportWindow,
        staff_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ReportData:
        staff_by_id = {s.staff_id: s for s in staff_list}
        staff_id = str(staff_id) if staff_id not in (None, "") else ALL_STAFF

        staff_name = None
        if staff_id != ALL_STAFF:
            found = staff_by_id.get(staff_id)
            staff_name = found.name if found else UNKNOWN_STAFF_NAME

        rows = []
        for idx, m in enumerate(filter_by_window(movements, window, staff_id, tz=self._tz), start=1):
            owner = staff_by_id.get(m.staff_id)
            rows.append(
                {
                    "no": idx,
                    "id": m.movement_id,
                    "staff_id": m.staff_id,
                    "staff_name": m.staff_name or (owner.name if owner else UNKNOWN_STAFF_NAME),
                    "position": owner.position if owner else "",
                    "date_out": normalize_date(m.date_out, tz=self._tz),
                    "date_return": normalize_date(m.date_return, tz=self._tz),
                    "date_out_display": format_display_date(m.date_out, tz=self._tz),
                    "date_return_display": format_display_date(m.date_return, tz=self._tz),
                    "location": m.location,
                    "state": m.state,
                    "purpose": m.purpose,
                    "time_status": classify_movement(m.date_out, m.date_return, today=today, tz=self._tz).value,
                }
            )

        printed = today or now_local(self._tz).date()
        return ReportData(
            window=window,
            staff_id=staff_id,
            staff_name=staff_name,
            printed_on=printed.strftime("%d/%m/%Y"),
            rows=rows,
        )

    def export_csv(self, report: ReportData) -> bytes:
        return to_csv_bytes(
            REPORT_CSV_HEADERS,
            (
                [
                    r["no"],
                    r["staff_name"],
                    r["position"],
                    r["date_out_display"],
                    r["date_return_display"],
                    f"{r['location']}, {r['state']}",
                    r["purpose"],
                    r["time_status"],
                ]
                for r in report.rows
            ),
        )
