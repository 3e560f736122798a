from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import tzinfo
from typing import Any, Optional, Sequence

from ..common.csv_export import to_csv_bytes
from ..common.datetime_utils import today_iso
from ..core.constants import EMPTY_CELL
from ..core.enums import StaffStatus
from ..movements.model import Movement
from ..staff.model import Staff
from .resolver import movement_on

SEARCH_CSV_HEADERS = (
    "Nama Pegawai",
    "Jawatan",
    "Status",
    "Lokasi",
    "Tarikh Keluar",
    "Tarikh Balik",
    "Tujuan",
)


@dataclass(frozen=True)
class PresenceRow:
    staff: Staff
    status: StaffStatus
    movement: Optional[Movement] = None

    def to_dict(self) -> dict:
        m = self.movement
        return {
            "staff_id": self.staff.staff_id,
            "name": self.staff.name,
            "position": self.staff.position,
            "status": self.status.value,
            "out": self.status == StaffStatus.OUT_OF_OFFICE,
            "movement": None
            if m is None
            else {
                "id": m.movement_id,
                "location": m.location,
                "state": m.state,
                "date_out": m.date_out,
                "date_return": m.date_return,
                "purpose": m.purpose,
            },
        }


@dataclass(frozen=True)
class PresenceReport:
    date: str
    rows: list[PresenceRow]

    @property
    def out_count(self) -> int:
        return sum(1 for r in self.rows if r.status == StaffStatus.OUT_OF_OFFICE)

    @property
    def in_count(self) -> int:
        return sum(1 for r in self.rows if r.status == StaffStatus.IN_OFFICE)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "stats": {"in": self.in_count, "out": self.out_count, "total": len(self.rows)},
            "rows": [r.to_dict() for r in self.rows],
        }


def _matches(staff: Staff, term: str) -> bool:
    return term in staff.name.lower() or term in staff.position.lower()


class PresenceService:
    """Read-only projections over the last loaded staff and movements."""

    def __init__(self, *, tz: Optional[tzinfo] = None):
        self._tz = tz

    def board(self, staff_list: Sequence[Staff]) -> dict:
        """Dashboard: cached statuses in rank order, plus counts."""
        inside = sum(1 for s in staff_list if s.current_status == StaffStatus.IN_OFFICE)
        outside = sum(1 for s in staff_list if s.current_status == StaffStatus.OUT_OF_OFFICE)
        return {
            "stats": {"in": inside, "out": outside, "total": len(staff_list)},
            "staff": [
                {
                    "staff_id": s.staff_id,
                    "name": s.name,
                    "position": s.position,
                    "status": s.current_status.value,
                    "rank": s.rank,
                }
                for s in sorted(staff_list, key=lambda s: s.rank)
            ],
        }

    def status_on_date(
        self,
        staff_list: Sequence[Staff],
        movements: Sequence[Movement],
        *,
        day: Any = None,
        search_term: str = "",
    ) -> PresenceReport:
        """Who is out on ``day`` (default today), optionally filtered by name/position."""
        target = today_iso(day, tz=self._tz)
        by_staff: dict[str, list[Movement]] = defaultdict(list)
        for m in movements:
            by_staff[m.staff_id].append(m)

        term = (search_term or "").strip().lower()
        rows = []
        for s in staff_list:
            if term and not _matches(s, term):
                continue
            found = movement_on(by_staff.get(s.staff_id), target, tz=self._tz)
            status = StaffStatus.OUT_OF_OFFICE if found else StaffStatus.IN_OFFICE
            rows.append(PresenceRow(staff=s, status=status, movement=found))
        return PresenceReport(date=target, rows=rows)

    def export_csv(self, report: PresenceReport) -> bytes:
        def _row(r: PresenceRow) -> list[str]:
            m = r.movement
            if m is None:
                return [r.staff.name, r.staff.position, r.status.value] + [EMPTY_CELL] * 4
            return [
                r.staff.name,
                r.staff.position,
                r.status.value,
                f"{m.location}, {m.state}",
                m.date_out,
                m.date_return,
                m.purpose,
            ]

        return to_csv_bytes(SEARCH_CSV_HEADERS, (_row(r) for r in report.rows))
