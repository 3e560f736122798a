"""In-memory stand-ins for the store-backed repositories."""
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from movement_tracker.core.enums import Role, StaffStatus
from movement_tracker.core.exceptions import StoreError
from movement_tracker.movements.model import Movement
from movement_tracker.staff.model import Staff


class InMemoryStaff:
    def __init__(self, staff: Optional[list[Staff]] = None):
        self._staff: dict[str, Staff] = {s.staff_id: s for s in staff or []}
        self._next_id = 100
        self.updates: list[Staff] = []
        self.deleted: list[str] = []

    def list_all(self):
        return sorted(self._staff.values(), key=lambda s: s.rank)

    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        return self._staff.get(str(staff_id))

    def create(self, *, name, position, username, password, role, rank) -> Staff:
        self._next_id += 1
        staff = Staff(
            staff_id=str(self._next_id),
            name=name,
            position=position,
            username=username,
            password=password,
            role=role,
            rank=rank,
        )
        self._staff[staff.staff_id] = staff
        return staff

    def update(self, staff: Staff) -> None:
        self.updates.append(staff)
        self._staff[staff.staff_id] = staff

    def delete(self, staff_id: str) -> None:
        self.deleted.append(str(staff_id))
        self._staff.pop(str(staff_id), None)


class FailingStaff(InMemoryStaff):
    """Reads work, writes blow up (store rejects the POST)."""

    def update(self, staff: Staff) -> None:
        raise StoreError("updateStaff failed: 500")


class InMemoryMovements:
    def __init__(self, movements: Optional[list[Movement]] = None):
        self._movements: dict[str, Movement] = {m.movement_id: m for m in movements or []}
        self._next_id = 0

    def list_all(self):
        return list(self._movements.values())

    def get_by_id(self, movement_id: str) -> Optional[Movement]:
        return self._movements.get(str(movement_id))

    def create(self, movement: Movement) -> Movement:
        self._next_id += 1
        created = replace(movement, movement_id=f"m{self._next_id}")
        self._movements[created.movement_id] = created
        return created

    def update(self, movement: Movement) -> None:
        self._movements[movement.movement_id] = movement

    def delete(self, movement_id: str) -> None:
        self._movements.pop(str(movement_id), None)


def make_staff(staff_id: str, name: str = "", *, role: Role = Role.STAFF, rank: int = 1, **kwargs) -> Staff:
    return Staff(
        staff_id=staff_id,
        name=name or f"Staff {staff_id}",
        position=kwargs.pop("position", "Nazir"),
        username=kwargs.pop("username", f"user{staff_id}"),
        password=kwargs.pop("password", "secret"),
        role=role,
        rank=rank,
        current_status=kwargs.pop("current_status", StaffStatus.IN_OFFICE),
    )


def make_movement(movement_id: str, staff_id: str, date_out, date_return, **kwargs) -> Movement:
    return Movement(
        movement_id=movement_id,
        staff_id=staff_id,
        date_out=date_out,
        date_return=date_return,
        location=kwargs.pop("location", "Kuala Terengganu"),
        state=kwargs.pop("state", "Terengganu"),
        purpose=kwargs.pop("purpose", "Pemantauan sekolah"),
        staff_name=kwargs.pop("staff_name", ""),
    )


