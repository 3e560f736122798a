from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import normalize_date
from ..core.constants import ALL_STAFF
from ..movements.model import Movement
from .window import ReportWindow


def filter_by_window(
    movements: Optional[Iterable[Movement]],
    window: ReportWindow,
    staff_id: Optional[str] = None,
    *,
    tz: Optional[tzinfo] = None,
) -> list[Movement]:
    """Movements whose inclusive range overlaps ``window``, oldest first.

    A movement missing either date is left out. Partial overlap at either
    end counts. Ties keep input order (sort is stable). The input is not
    modified.
    """
    wanted = None if staff_id in (None, "", ALL_STAFF) else str(staff_id)

    keyed: list[tuple[str, Movement]] = []
    for m in movements or ():
        if wanted is not None and m.staff_id != wanted:
            continue
        start = normalize_date(m.date_out, tz=tz)
        end = normalize_date(m.date_return, tz=tz)
        if not start or not end:
            continue
        if start <= window.end and end >= window.start:
            keyed.append((start, m))

    keyed.sort(key=lambda pair: pair[0])
    return [m for _, m in keyed]
