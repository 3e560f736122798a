from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Movement


class MovementRepository(Protocol):
    def list_all(self) -> Sequence[Movement]:
        raise NotImplementedError

    def get_by_id(self, movement_id: str) -> Optional[Movement]:
        raise NotImplementedError

    def create(self, movement: Movement) -> Movement:
        """Persist a new movement. ``movement_id`` is assigned by the repository."""

        raise NotImplementedError

    def update(self, movement: Movement) -> None:
        raise NotImplementedError

    def delete(self, movement_id: str) -> None:
        raise NotImplementedError
