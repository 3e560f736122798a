from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Sequence

from ..core.enums import StaffStatus
from ..store.connection import StoreConnection
from ..store.http_base import as_text, fetch_rows, new_record_id, send_action
from .model import Movement
from .repository import MovementRepository


def _optional_text(value: Any) -> Optional[str]:
    text = as_text(value, strip=True)
    return text or None


def _parse_status(value: Any) -> StaffStatus:
    try:
        return StaffStatus(as_text(value, strip=True))
    except ValueError:
        return StaffStatus.OUT_OF_OFFICE


def row_to_movement(row: Dict[str, Any]) -> Movement:
    return Movement(
        movement_id=as_text(row.get("id")),
        staff_id=as_text(row.get("staffId")),
        staff_name=as_text(row.get("staffName")),
        date_out=as_text(row.get("dateOut")),
        date_return=as_text(row.get("dateReturn")),
        time_out=_optional_text(row.get("timeOut")),
        time_return=_optional_text(row.get("timeReturn")),
        location=as_text(row.get("location")),
        state=as_text(row.get("state")),
        purpose=as_text(row.get("purpose")),
        status_frequency=_parse_status(row.get("statusFrequency")),
    )


def movement_to_row(m: Movement) -> Dict[str, Any]:
    return {
        "id": m.movement_id,
        "staffId": m.staff_id,
        "staffName": m.staff_name,
        "dateOut": m.date_out,
        "dateReturn": m.date_return,
        "timeOut": m.time_out or "",
        "timeReturn": m.time_return or "",
        "location": m.location,
        "state": m.state,
        "purpose": m.purpose,
        "statusFrequency": m.status_frequency.value,
    }


class HttpMovementRepository(MovementRepository):
    def __init__(self, conn: StoreConnection):
        self._conn = conn

    def list_all(self) -> Sequence[Movement]:
        return [row_to_movement(r) for r in fetch_rows(self._conn, "getMovements")]

    def get_by_id(self, movement_id: str) -> Optional[Movement]:
        for m in self.list_all():
            if m.movement_id == str(movement_id):
                return m
        return None

    def create(self, movement: Movement) -> Movement:
        created = replace(movement, movement_id=new_record_id("m"))
        send_action(self._conn, "addMovement", movement_to_row(created))
        return created

    def update(self, movement: Movement) -> None:
        send_action(self._conn, "updateMovement", movement_to_row(movement))

    def delete(self, movement_id: str) -> None:
        send_action(self._conn, "deleteMovement", {"id": str(movement_id)})
