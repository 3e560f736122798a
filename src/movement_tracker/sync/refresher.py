from __future__ import annotations

import logging
import threading
from typing import Optional

from ..core.constants import DEFAULT_REFRESH_SECONDS
from .service import DataRefreshService

logger = logging.getLogger(__name__)


class PeriodicRefresher:
    """Run a silent data refresh on a daemon thread at a fixed interval.

    There is no cancellation of a refresh in flight; ``stop`` only prevents
    the next tick.
    """

    def __init__(self, service: DataRefreshService, *, interval: float = DEFAULT_REFRESH_SECONDS):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._service = service
        self._interval = float(interval)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="Refresher", daemon=True)
        self._thread.start()
        logger.info("Periodic refresh every %.0fs", self._interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def tick(self) -> None:
        try:
            self._service.refresh()
        except Exception:
            # Keep the loop alive whatever a single cycle does.
            logger.exception("Periodic refresh failed")

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            self.tick()
