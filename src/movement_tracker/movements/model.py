from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import StaffStatus


@dataclass(frozen=True)
class Movement:
    """Domain entity: one out-of-office trip.

    ``date_out`` and ``date_return`` are kept exactly as the store returned
    them; normalize before comparing. Both ends are inclusive.
    """

    movement_id: str
    staff_id: str
    date_out: str
    date_return: str
    location: str = ""
    state: str = ""
    purpose: str = ""
    staff_name: str = ""
    time_out: Optional[str] = None
    time_return: Optional[str] = None
    status_frequency: StaffStatus = StaffStatus.OUT_OF_OFFICE
