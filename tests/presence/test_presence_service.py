from __future__ import annotations

import csv
import io

from movement_tracker.core.enums import StaffStatus
from movement_tracker.presence.service import PresenceService

from tests.fakes import make_movement, make_staff


def _staff():
    return [
        make_staff("1", "Ali bin Abu", rank=2, position="Nazir"),
        make_staff("2", "Siti Aminah", rank=1, position="Pegawai Tadbir", current_status=StaffStatus.OUT_OF_OFFICE),
        make_staff("3", "Chong Wei", rank=3, position="Nazir Kanan"),
    ]


def test_board_counts_cached_status_in_rank_order():
    board = PresenceService().board(_staff())
    assert board["stats"] == {"in": 2, "out": 1, "total": 3}
    assert [s["staff_id"] for s in board["staff"]] == ["2", "1", "3"]


def test_status_on_date_uses_movements_not_cache():
    movements = [make_movement("m1", "1", "2025-03-01", "2025-03-05", location="Dungun")]
    report = PresenceService().status_on_date(_staff(), movements, day="2025-03-04")

    by_id = {r.staff.staff_id: r for r in report.rows}
    assert by_id["1"].status == StaffStatus.OUT_OF_OFFICE
    assert by_id["1"].movement.location == "Dungun"
    assert by_id["2"].status == StaffStatus.IN_OFFICE
    assert (report.in_count, report.out_count) == (2, 1)
    assert report.date == "2025-03-04"


def test_status_on_date_accepts_loose_date():
    movements = [make_movement("m1", "1", "2025-03-01", "2025-03-05")]
    report = PresenceService().status_on_date(_staff(), movements, day="4/3/2025")
    assert report.date == "2025-03-04"
    assert report.out_count == 1


def test_search_term_matches_name_or_position():
    svc = PresenceService()
    assert [r.staff.staff_id for r in svc.status_on_date(_staff(), [], day="2025-03-04", search_term="siti").rows] == ["2"]
    assert [r.staff.staff_id for r in svc.status_on_date(_staff(), [], day="2025-03-04", search_term="NAZIR").rows] == ["1", "3"]


def test_export_csv_quotes_everything():
    movements = [make_movement("m1", "1", "2025-03-01", "2025-03-05", purpose='Taklimat "SKPMg2"')]
    svc = PresenceService()
    payload = svc.export_csv(svc.status_on_date(_staff(), movements, day="2025-03-04"))

    text = payload.decode("utf-8-sig")
    lines = text.strip().split("\n")
    assert lines[0] == '"Nama Pegawai","Jawatan","Status","Lokasi","Tarikh Keluar","Tarikh Balik","Tujuan"'
    assert '"Taklimat ""SKPMg2"""' in lines[1]
    assert lines[2] == '"Siti Aminah","Pegawai Tadbir","Dalam Pejabat","-","-","-","-"'

    rows = list(csv.reader(io.StringIO(text)))
    assert rows[1][3] == "Kuala Terengganu, Terengganu"
