from __future__ import annotations

from datetime import date

from movement_tracker.core.enums import StaffStatus
from movement_tracker.presence.resolver import movement_on, resolve_status

from tests.fakes import make_movement


def test_no_movements_means_in_office():
    assert resolve_status([], today="2025-03-03") == StaffStatus.IN_OFFICE
    assert resolve_status(None, today="2025-03-03") == StaffStatus.IN_OFFICE


def test_out_while_covered_in_after_return():
    m = make_movement("m", "1", "2025-03-01", "2025-03-05")
    assert resolve_status([m], today="2025-03-03") == StaffStatus.OUT_OF_OFFICE
    assert resolve_status([m], today="2025-03-06") == StaffStatus.IN_OFFICE


def test_both_ends_inclusive():
    m = make_movement("m", "1", "2025-03-01", "2025-03-05")
    assert resolve_status([m], today="2025-03-01") == StaffStatus.OUT_OF_OFFICE
    assert resolve_status([m], today="2025-03-05") == StaffStatus.OUT_OF_OFFICE
    assert resolve_status([m], today="2025-02-28") == StaffStatus.IN_OFFICE


def test_loose_formats_are_normalized_before_comparing(fixed_today):
    m = make_movement("m", "1", "1/3/2025", "2025/3/5")
    assert resolve_status([m], today=fixed_today) == StaffStatus.OUT_OF_OFFICE


def test_any_covering_movement_is_enough():
    old = make_movement("old", "1", "2025-01-01", "2025-01-02")
    now = make_movement("now", "1", "2025-03-02", "2025-03-04")
    also = make_movement("also", "1", "2025-03-03", "2025-03-03")
    assert resolve_status([old, now, also], today="2025-03-03") == StaffStatus.OUT_OF_OFFICE
    assert movement_on([old, now, also], "2025-03-03") is now


def test_missing_dates_never_cover():
    m = make_movement("m", "1", None, "2099-01-01")
    assert resolve_status([m], today="2025-03-03") == StaffStatus.IN_OFFICE


def test_defaults_to_current_day():
    today = date.today()
    m = make_movement("m", "1", today.isoformat(), today.isoformat())
    assert resolve_status([m]) == StaffStatus.OUT_OF_OFFICE
