from __future__ import annotations

import pytest

from movement_tracker.core.enums import Role
from movement_tracker.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from movement_tracker.staff.service import AuthService, StaffService

from tests.fakes import InMemoryStaff, make_staff


def _repo():
    return InMemoryStaff(
        [
            make_staff("1", "Admin", role=Role.ADMIN, rank=1, username="Admin", password="abcd"),
            make_staff("2", "Ali", rank=2, username="ali", password=" p@ss "),
        ]
    )


def test_login_username_is_case_insensitive_and_trimmed():
    user = AuthService(_repo()).authenticate("  ADMIN ", "abcd")
    assert user.staff_id == "1"
    assert user.is_admin


def test_login_password_is_exact_after_trim():
    auth = AuthService(_repo())
    assert auth.authenticate("ali", "p@ss").staff_id == "2"
    with pytest.raises(AuthenticationError, match="Username atau Password salah"):
        auth.authenticate("ali", "P@SS")


def test_login_with_empty_staff_sheet_is_a_store_problem():
    with pytest.raises(StoreError):
        AuthService(InMemoryStaff()).authenticate("ali", "p@ss")


def test_create_staff_appends_rank():
    repo = _repo()
    created = StaffService(repo).create_staff(
        current_role=Role.ADMIN, name=" Siti ", position="Nazir", username="siti", password="1234"
    )
    assert created.name == "Siti"
    assert created.rank == 3
    assert created.role == Role.STAFF
    assert repo.get_by_id(created.staff_id) == created


def test_create_staff_rules():
    svc = StaffService(_repo())
    with pytest.raises(AuthorizationError):
        svc.create_staff(current_role=Role.STAFF, name="X", position="Y", username="x", password="1234")
    with pytest.raises(ValidationError, match="telah digunakan"):
        svc.create_staff(current_role=Role.ADMIN, name="X", position="Y", username="ALI", password="1234")
    with pytest.raises(ValidationError):
        svc.create_staff(current_role=Role.ADMIN, name="X", position="Y", username="x", password="123")


def test_update_staff_keeps_unspecified_fields():
    repo = _repo()
    updated = StaffService(repo).update_staff(current_role=Role.ADMIN, staff_id="2", position="Nazir Kanan", rank=5)
    assert updated.position == "Nazir Kanan"
    assert updated.rank == 5
    assert updated.password == " p@ss "
    assert repo.updates == [updated]


def test_update_missing_staff():
    with pytest.raises(NotFoundError):
        StaffService(_repo()).update_staff(current_role=Role.ADMIN, staff_id="404", name="X")


def test_delete_staff():
    repo = _repo()
    svc = StaffService(repo)
    with pytest.raises(ValidationError):
        svc.delete_staff(current_role=Role.ADMIN, current_staff_id="1", staff_id="1")
    with pytest.raises(AuthorizationError):
        svc.delete_staff(current_role=Role.STAFF, current_staff_id="2", staff_id="1")

    svc.delete_staff(current_role=Role.ADMIN, current_staff_id="1", staff_id="2")
    assert repo.deleted == ["2"]


def test_update_profile_requires_matching_passwords():
    repo = _repo()
    svc = StaffService(repo)
    with pytest.raises(ValidationError, match="tidak sepadan"):
        svc.update_profile(staff_id="2", name="Ali", position="Nazir", password="abcd", confirm_password="abce")

    updated = svc.update_profile(staff_id="2", name="Ali Baba", position="Nazir", password="abcd", confirm_password="abcd")
    assert updated.name == "Ali Baba"
    assert repo.get_by_id("2").password == "abcd"


def test_numeric_password_values_are_text():
    repo = _repo()
    svc = StaffService(repo)

    assert svc.update_staff(current_role=Role.ADMIN, staff_id="2", password=98765).password == "98765"
    assert svc.update_staff(current_role=Role.ADMIN, staff_id="2", password="").password == "98765"
    with pytest.raises(ValidationError):
        svc.update_staff(current_role=Role.ADMIN, staff_id="2", password=12)

    updated = svc.update_profile(staff_id="2", name="Ali", position="Nazir", password=5555, confirm_password="5555")
    assert updated.password == "5555"
    assert AuthService(repo).authenticate("ali", 5555).staff_id == "2"
