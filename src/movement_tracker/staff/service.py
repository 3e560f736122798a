from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import as_form_text, require_min_length, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, StoreError, ValidationError
from .model import Staff
from .repository import StaffRepository
from .session import SessionUser

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AuthService:
    """Use case: authenticate staff (login).

    Credentials live in the staff sheet as plain text, so the check is a
    direct comparison: username case-insensitive, password exact, both trimmed.
    """

    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def authenticate(self, username: str, password: str) -> SessionUser:
        staff_list = self._staff.list_all()
        if not staff_list:
            raise StoreError("Empty staff data returned")

        username = as_form_text(username).strip().lower()
        password = as_form_text(password).strip()

        for s in staff_list:
            if s.username.strip().lower() == username and s.password.strip() == password:
                logger.info("Login ok for staff %s", s.staff_id)
                return SessionUser.from_staff(s)

        raise AuthenticationError("Username atau Password salah.")


class StaffService:
    """Use case: manage staff records (admin) and the own profile."""

    def __init__(self, staff: StaffRepository):
        self._staff = staff

    @staticmethod
    def _new_password(value) -> str:
        return require_min_length(require_non_empty(value, "Password"), "Password", MIN_PASSWORD_LENGTH)

    def list_staff(self) -> Sequence[Staff]:
        return self._staff.list_all()

    def get(self, staff_id: str) -> Staff:
        staff = self._staff.get_by_id(str(staff_id))
        if not staff:
            raise NotFoundError("Staf tidak wujud")
        return staff

    def create_staff(
        self,
        *,
        current_role: Role,
        name: str,
        position: str,
        username: str,
        password: str,
        role: Role = Role.STAFF,
    ) -> Staff:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Anda tiada kebenaran")

        name = require_non_empty(name, "Nama")
        position = require_non_empty(position, "Jawatan")
        username = require_non_empty(username, "Username")
        password = self._new_password(password)

        existing = self._staff.list_all()
        if any(s.username.lower() == username.lower() for s in existing):
            raise ValidationError("Username telah digunakan")

        # New staff go to the end of the list.
        return self._staff.create(
            name=name,
            position=position,
            username=username,
            password=password,
            role=Role(role),
            rank=len(existing) + 1,
        )

    def update_staff(
        self,
        *,
        current_role: Role,
        staff_id: str,
        name: Optional[str] = None,
        position: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[Role] = None,
        rank: Optional[int] = None,
    ) -> Staff:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Anda tiada kebenaran")

        original = self.get(staff_id)
        updated = replace(
            original,
            name=require_non_empty(name, "Nama") if name is not None else original.name,
            position=require_non_empty(position, "Jawatan") if position is not None else original.position,
            username=require_non_empty(username, "Username") if username is not None else original.username,
            password=self._new_password(password) if as_form_text(password).strip() else original.password,
            role=Role(role) if role is not None else original.role,
            rank=int(rank) if rank is not None else original.rank,
        )
        self._staff.update(updated)
        return updated

    def delete_staff(self, *, current_role: Role, current_staff_id: str, staff_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Anda tiada kebenaran")
        if str(staff_id) == str(current_staff_id):
            raise ValidationError("Tidak boleh memadam akaun sendiri")

        self.get(staff_id)
        self._staff.delete(str(staff_id))

    def update_profile(
        self,
        *,
        staff_id: str,
        name: str,
        position: str,
        password: str,
        confirm_password: str,
    ) -> Staff:
        if as_form_text(password) != as_form_text(confirm_password):
            raise ValidationError("Kata laluan baru tidak sepadan.")

        original = self.get(staff_id)
        updated = replace(
            original,
            name=require_non_empty(name, "Nama"),
            position=require_non_empty(position, "Jawatan"),
            password=self._new_password(password),
        )
        self._staff.update(updated)
        return updated
