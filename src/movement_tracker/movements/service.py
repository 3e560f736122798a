from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, tzinfo
from typing import Optional, Sequence

from ..common.datetime_utils import format_display_date, normalize_date
from ..common.validators import require_date, require_date_order, require_non_empty
from ..core.constants import DEFAULT_STATE
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Movement
from .repository import MovementRepository
from .time_status import classify_movement, status_frequency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovementForm:
    date_out: str
    date_return: str
    location: str
    purpose: str
    state: str = DEFAULT_STATE
    time_out: Optional[str] = None
    time_return: Optional[str] = None


def newest_first(movements: Sequence[Movement], *, tz: Optional[tzinfo] = None) -> list[Movement]:
    """Latest date out first, judged on the same calendar day the rows display."""
    return sorted(movements, key=lambda m: normalize_date(m.date_out, tz=tz), reverse=True)


class MovementService:
    def __init__(self, movements: MovementRepository, *, tz: Optional[tzinfo] = None):
        self._movements = movements
        self._tz = tz

    def _clean(self, form: MovementForm) -> MovementForm:
        date_out = require_date(form.date_out, "Tarikh Keluar")
        date_return = require_date(form.date_return, "Tarikh Balik")
        require_date_order(date_out, date_return)
        return MovementForm(
            date_out=date_out,
            date_return=date_return,
            location=require_non_empty(form.location, "Lokasi"),
            purpose=require_non_empty(form.purpose, "Tujuan"),
            state=(form.state or "").strip() or DEFAULT_STATE,
            time_out=(form.time_out or "").strip() or None,
            time_return=(form.time_return or "").strip() or None,
        )

    def _get_owned(self, *, movement_id: str, staff_id: str, role: Role) -> Movement:
        movement = self._movements.get_by_id(str(movement_id))
        if not movement:
            raise NotFoundError("Rekod pergerakan tidak wujud")
        if role != Role.ADMIN and movement.staff_id != str(staff_id):
            raise AuthorizationError("Anda hanya boleh mengubah rekod sendiri")
        return movement

    def record(self, *, staff_id: str, staff_name: str, form: MovementForm, today: Optional[date] = None) -> Movement:
        form = self._clean(form)
        movement = Movement(
            movement_id="",
            staff_id=str(staff_id),
            staff_name=staff_name,
            date_out=form.date_out,
            date_return=form.date_return,
            time_out=form.time_out,
            time_return=form.time_return,
            location=form.location,
            state=form.state,
            purpose=form.purpose,
            status_frequency=status_frequency(form.date_return, today=today, tz=self._tz),
        )
        created = self._movements.create(movement)
        logger.info("Movement %s recorded for staff %s (%s..%s)", created.movement_id, staff_id, form.date_out, form.date_return)
        return created

    def update(
        self,
        *,
        movement_id: str,
        staff_id: str,
        role: Role,
        form: MovementForm,
        today: Optional[date] = None,
    ) -> Movement:
        original = self._get_owned(movement_id=movement_id, staff_id=staff_id, role=role)
        form = self._clean(form)
        updated = replace(
            original,
            date_out=form.date_out,
            date_return=form.date_return,
            time_out=form.time_out,
            time_return=form.time_return,
            location=form.location,
            state=form.state,
            purpose=form.purpose,
            status_frequency=status_frequency(form.date_return, today=today, tz=self._tz),
        )
        self._movements.update(updated)
        return updated

    def delete(self, *, movement_id: str, staff_id: str, role: Role) -> None:
        movement = self._get_owned(movement_id=movement_id, staff_id=staff_id, role=role)
        self._movements.delete(movement.movement_id)
        logger.info("Movement %s deleted by staff %s", movement.movement_id, staff_id)

    def my_movements(self, staff_id: str, *, today: Optional[date] = None) -> list[dict]:
        own = [m for m in self._movements.list_all() if m.staff_id == str(staff_id)]
        return [self.to_ui(m, today=today) for m in newest_first(own, tz=self._tz)]

    def all_movements(self, *, current_role: Role, today: Optional[date] = None) -> list[dict]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Anda tiada kebenaran")
        return [self.to_ui(m, today=today) for m in newest_first(self._movements.list_all(), tz=self._tz)]

    def to_ui(self, m: Movement, *, today: Optional[date] = None) -> dict:
        time_status = classify_movement(m.date_out, m.date_return, today=today, tz=self._tz)
        return {
            "id": m.movement_id,
            "staff_id": m.staff_id,
            "staff_name": m.staff_name,
            # Canonical dates are what edit forms expect back.
            "date_out": normalize_date(m.date_out, tz=self._tz),
            "date_return": normalize_date(m.date_return, tz=self._tz),
            "date_out_display": format_display_date(m.date_out, tz=self._tz),
            "date_return_display": format_display_date(m.date_return, tz=self._tz),
            "time_out": m.time_out or "",
            "time_return": m.time_return or "",
            "location": m.location,
            "state": m.state,
            "purpose": m.purpose,
            "time_status": time_status.value,
        }
