from __future__ import annotations

from datetime import tzinfo
from typing import Any, Optional

from ..common.datetime_utils import normalize_date, today_iso
from ..core.enums import MovementTimeStatus, StaffStatus


def classify_movement(
    date_out: Any,
    date_return: Any,
    *,
    today: Any = None,
    tz: Optional[tzinfo] = None,
) -> MovementTimeStatus:
    """FINISHED once the return day is behind us, ACTIVE otherwise.

    Only the return date decides: a trip starting today or in the future is
    ACTIVE just like one in progress. ``date_out`` is accepted so callers can
    pass a movement's range as-is.
    """
    if normalize_date(date_return, tz=tz) < today_iso(today, tz=tz):
        return MovementTimeStatus.FINISHED
    return MovementTimeStatus.ACTIVE


def status_frequency(date_return: Any, *, today: Any = None, tz: Optional[tzinfo] = None) -> StaffStatus:
    """Status stamped on a movement row when it is written."""
    if classify_movement(None, date_return, today=today, tz=tz) == MovementTimeStatus.ACTIVE:
        return StaffStatus.OUT_OF_OFFICE
    return StaffStatus.IN_OFFICE
