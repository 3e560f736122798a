from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.exceptions import StoreError
from ..movements.model import Movement
from ..movements.repository import MovementRepository
from ..presence.reconciler import StatusReconciler
from ..staff.model import Staff
from ..staff.repository import StaffRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataSnapshot:
    """Last successfully loaded data, with the outcome of the latest attempt."""

    staff: tuple[Staff, ...] = ()
    movements: tuple[Movement, ...] = ()
    loaded_at: Optional[datetime] = None
    network_error: bool = False
    error_message: Optional[str] = field(default=None, compare=False)


class DataRefreshService:
    """Fetch staff and movements, reconcile statuses and keep the result.

    Refreshes may overlap (manual refresh while the periodic one runs); each
    publishes a complete snapshot, the last one to finish wins.
    """

    def __init__(self, staff: StaffRepository, movements: MovementRepository, reconciler: StatusReconciler):
        self._staff = staff
        self._movements = movements
        self._reconciler = reconciler
        self._lock = threading.Lock()
        self._snapshot = DataSnapshot()

    def snapshot(self) -> DataSnapshot:
        with self._lock:
            return self._snapshot

    def ensure_loaded(self) -> DataSnapshot:
        snap = self.snapshot()
        if snap.loaded_at is None:
            return self.refresh()
        return snap

    def refresh(self) -> DataSnapshot:
        try:
            staff = self._staff.list_all()
            movements = self._movements.list_all()
        except StoreError as e:
            logger.error("Failed to load data from store", exc_info=True)
            with self._lock:
                self._snapshot = DataSnapshot(
                    staff=self._snapshot.staff,
                    movements=self._snapshot.movements,
                    loaded_at=self._snapshot.loaded_at,
                    network_error=True,
                    error_message=str(e),
                )
                return self._snapshot

        synced = self._reconciler.reconcile(staff, movements)
        snap = DataSnapshot(staff=tuple(synced), movements=tuple(movements), loaded_at=datetime.now())
        with self._lock:
            self._snapshot = snap
        logger.debug("Refreshed %d staff, %d movements", len(snap.staff), len(snap.movements))
        return snap
