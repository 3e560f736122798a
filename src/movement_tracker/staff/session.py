"""Logged-in user kept in the Flask session.

The session is loaded explicitly per request, saved on login / profile
change and cleared on logout. Nothing else reads the raw session keys.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, MutableMapping, Optional

from ..core.enums import Role, View, views_for_role
from .model import Staff

SESSION_KEY = "sppks_user"


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    staff_id: str
    name: str
    position: str
    username: str
    role: Role

    @classmethod
    def from_staff(cls, staff: Staff) -> "SessionUser":
        return cls(
            staff_id=staff.staff_id,
            name=staff.name,
            position=staff.position,
            username=staff.username,
            role=staff.role,
        )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def views(self) -> list[View]:
        return views_for_role(self.role)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["role"] = self.role.value
        return data


def load_session(store: MutableMapping[str, Any]) -> Optional[SessionUser]:
    raw = store.get(SESSION_KEY)
    if not raw:
        return None
    try:
        return SessionUser(
            staff_id=str(raw["staff_id"]),
            name=str(raw["name"]),
            position=str(raw.get("position", "")),
            username=str(raw["username"]),
            role=Role(raw["role"]),
        )
    except (KeyError, TypeError, ValueError):
        # Corrupt or outdated session payload.
        store.pop(SESSION_KEY, None)
        return None


def save_session(store: MutableMapping[str, Any], user: SessionUser) -> None:
    store[SESSION_KEY] = user.to_dict()


def clear_session(store: MutableMapping[str, Any]) -> None:
    store.pop(SESSION_KEY, None)
