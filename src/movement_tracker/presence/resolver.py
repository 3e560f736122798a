from __future__ import annotations

from datetime import tzinfo
from typing import Any, Iterable, Optional

from ..common.datetime_utils import normalize_date, today_iso
from ..core.enums import StaffStatus
from ..movements.model import Movement


def covers(movement: Movement, day: str, *, tz: Optional[tzinfo] = None) -> bool:
    """Does the inclusive [date_out, date_return] range contain ``day`` (canonical)?"""
    start = normalize_date(movement.date_out, tz=tz)
    end = normalize_date(movement.date_return, tz=tz)
    if not start or not end:
        return False
    return start <= day <= end


def movement_on(
    movements: Optional[Iterable[Movement]],
    day: Any = None,
    *,
    tz: Optional[tzinfo] = None,
) -> Optional[Movement]:
    """First movement covering ``day`` (default today), or None."""
    target = today_iso(day, tz=tz)
    for m in movements or ():
        if covers(m, target, tz=tz):
            return m
    return None


def resolve_status(
    movements: Optional[Iterable[Movement]],
    *,
    today: Any = None,
    tz: Optional[tzinfo] = None,
) -> StaffStatus:
    """OUT_OF_OFFICE when any of the staff member's movements covers today."""
    if movement_on(movements, today, tz=tz) is not None:
        return StaffStatus.OUT_OF_OFFICE
    return StaffStatus.IN_OFFICE
