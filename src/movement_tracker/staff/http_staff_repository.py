from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role, StaffStatus
from ..store.connection import StoreConnection
from ..store.http_base import as_text, fetch_rows, new_record_id, parse_rank, send_action
from .model import Staff
from .repository import StaffRepository


def _parse_role(value: Any) -> Role:
    try:
        return Role(as_text(value, strip=True).lower() or Role.STAFF.value)
    except ValueError:
        return Role.STAFF


def _parse_status(value: Any) -> StaffStatus:
    try:
        return StaffStatus(as_text(value, strip=True))
    except ValueError:
        return StaffStatus.IN_OFFICE


def row_to_staff(row: Dict[str, Any]) -> Staff:
    # Sheet cells arrive as numbers, nulls or padded strings.
    return Staff(
        staff_id=as_text(row.get("id")),
        name=as_text(row.get("name")),
        position=as_text(row.get("position")),
        username=as_text(row.get("username"), strip=True),
        password=as_text(row.get("password"), strip=True),
        role=_parse_role(row.get("role")),
        current_status=_parse_status(row.get("currentStatus")),
        rank=parse_rank(row.get("rank")),
    )


def staff_to_row(staff: Staff) -> Dict[str, Any]:
    return {
        "id": staff.staff_id,
        "name": staff.name,
        "position": staff.position,
        "username": staff.username,
        "password": staff.password,
        "role": staff.role.value,
        "currentStatus": staff.current_status.value,
        "rank": staff.rank,
    }


class HttpStaffRepository(StaffRepository):
    def __init__(self, conn: StoreConnection):
        self._conn = conn

    def list_all(self) -> Sequence[Staff]:
        staff = [row_to_staff(r) for r in fetch_rows(self._conn, "getStaff")]
        staff.sort(key=lambda s: s.rank)
        return staff

    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        for s in self.list_all():
            if s.staff_id == str(staff_id):
                return s
        return None

    def create(
        self,
        *,
        name: str,
        position: str,
        username: str,
        password: str,
        role: Role,
        rank: int,
    ) -> Staff:
        staff = Staff(
            staff_id=new_record_id(),
            name=name,
            position=position,
            username=username,
            password=password,
            role=role,
            current_status=StaffStatus.IN_OFFICE,
            rank=rank,
        )
        send_action(self._conn, "addStaff", staff_to_row(staff))
        return staff

    def update(self, staff: Staff) -> None:
        send_action(self._conn, "updateStaff", staff_to_row(staff))

    def delete(self, staff_id: str) -> None:
        send_action(self._conn, "deleteStaff", {"id": str(staff_id)})
