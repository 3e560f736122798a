from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Staff


class StaffRepository(Protocol):
    """Repository interface for Staff.

    Services depend on this interface, not on the concrete store.
    """

    def list_all(self) -> Sequence[Staff]:
        """All staff, ordered by rank ascending."""

        raise NotImplementedError

    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, staff: Staff) -> None:
        raise NotImplementedError

    def delete(self, staff_id: str) -> None:
        raise NotImplementedError
