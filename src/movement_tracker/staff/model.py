from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_RANK
from ..core.enums import Role, StaffStatus


@dataclass(frozen=True)
class Staff:
    """Domain entity: a staff member.

    ``current_status`` is a cached copy of what the movements say about today;
    it is refreshed by the status reconciler and may lag behind.
    """

    staff_id: str
    name: str
    position: str
    username: str
    password: str
    role: Role = Role.STAFF
    current_status: StaffStatus = StaffStatus.IN_OFFICE
    rank: int = DEFAULT_RANK

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
