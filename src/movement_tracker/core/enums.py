from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    STAFF = "staff"


class StaffStatus(str, Enum):
    """Presence status. Values are what the store keeps in the status column."""

    IN_OFFICE = "Dalam Pejabat"
    OUT_OF_OFFICE = "Keluar"


class MovementTimeStatus(str, Enum):
    """Whether a movement is over or still running/pending."""

    FINISHED = "SELESAI"
    ACTIVE = "DALAM TUGAS"


class View(str, Enum):
    """Navigable screens of the application."""

    DASHBOARD = "dashboard"
    SEARCH = "search"
    MOVEMENT = "movement"
    REPORTS = "reports"
    PROFILE = "profile"
    ADMIN = "admin"


def view_allowed(view: View, role: Role) -> bool:
    match view:
        case View.DASHBOARD | View.SEARCH | View.MOVEMENT | View.REPORTS | View.PROFILE:
            return True
        case View.ADMIN:
            return role == Role.ADMIN


def views_for_role(role: Role) -> list[View]:
    return [v for v in View if view_allowed(v, role)]
