from __future__ import annotations

import logging
from collections import defaultdict
from concurrent.futures import Executor, Future
from dataclasses import replace
from datetime import tzinfo
from typing import Any, Optional, Sequence

from ..core.enums import StaffStatus
from ..movements.model import Movement
from ..staff.model import Staff
from ..staff.repository import StaffRepository
from .resolver import resolve_status

logger = logging.getLogger(__name__)


class StatusReconciler:
    """Bring the cached ``Staff.current_status`` in line with the movements.

    Computing the status is pure; this class owns the side effect. Only rows
    whose status changed are written. Writes are fire-and-forget when an
    executor is given: a failed write is logged and dropped, the next refresh
    cycle will try again naturally.
    """

    def __init__(
        self,
        staff: StaffRepository,
        *,
        executor: Optional[Executor] = None,
        tz: Optional[tzinfo] = None,
    ):
        self._staff = staff
        self._executor = executor
        self._tz = tz

    def diff(
        self,
        staff_list: Sequence[Staff],
        movements: Sequence[Movement],
        *,
        today: Any = None,
    ) -> list[tuple[Staff, StaffStatus]]:
        """(staff, computed status) pairs whose cached status is stale."""
        by_staff: dict[str, list[Movement]] = defaultdict(list)
        for m in movements:
            by_staff[m.staff_id].append(m)

        changes = []
        for s in staff_list:
            computed = resolve_status(by_staff.get(s.staff_id), today=today, tz=self._tz)
            if computed != s.current_status:
                changes.append((s, computed))
        return changes

    def reconcile(
        self,
        staff_list: Sequence[Staff],
        movements: Sequence[Movement],
        *,
        today: Any = None,
    ) -> list[Staff]:
        changed = {s.staff_id: status for s, status in self.diff(staff_list, movements, today=today)}

        result = []
        for s in staff_list:
            status = changed.get(s.staff_id)
            if status is None:
                result.append(s)
                continue
            updated = replace(s, current_status=status)
            self._write(updated)
            result.append(updated)
        return result

    def _write(self, staff: Staff) -> None:
        if self._executor is None:
            self._safe_update(staff)
            return
        future = self._executor.submit(self._staff.update, staff)
        future.add_done_callback(lambda f, s=staff: self._log_failure(f, s))

    def _safe_update(self, staff: Staff) -> None:
        try:
            self._staff.update(staff)
        except Exception:
            logger.warning("Status sync failed for staff %s", staff.staff_id, exc_info=True)

    @staticmethod
    def _log_failure(future: Future, staff: Staff) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.warning("Status sync failed for staff %s: %s", staff.staff_id, exc)
