from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .common.datetime_utils import observer_zone
from .core.constants import DEFAULT_REFRESH_SECONDS, DEFAULT_STORE_TIMEOUT
from .movements.http_movement_repository import HttpMovementRepository
from .movements.repository import MovementRepository
from .movements.service import MovementService
from .presence.reconciler import StatusReconciler
from .presence.service import PresenceService
from .reports.service import MovementReportService
from .staff.http_staff_repository import HttpStaffRepository
from .staff.repository import StaffRepository
from .staff.service import AuthService, StaffService
from .store.connection import StoreConfig, StoreConnection
from .sync.refresher import PeriodicRefresher
from .sync.service import DataRefreshService

# Status write-backs are small; a handful of workers is plenty.
SYNC_WORKERS = 4


@dataclass(frozen=True)
class Container:
    staff_repo: StaffRepository
    movements_repo: MovementRepository

    auth_service: AuthService
    staff_service: StaffService
    movement_service: MovementService
    presence_service: PresenceService
    report_service: MovementReportService
    data_service: DataRefreshService
    refresher: PeriodicRefresher

    tz: Optional[tzinfo] = None
    conn: Optional[StoreConnection] = None


def build_services(
    staff_repo: StaffRepository,
    movements_repo: MovementRepository,
    *,
    tz: Optional[tzinfo] = None,
    executor: Optional[Executor] = None,
    refresh_interval: float = DEFAULT_REFRESH_SECONDS,
    conn: Optional[StoreConnection] = None,
) -> Container:
    reconciler = StatusReconciler(staff_repo, executor=executor, tz=tz)
    data_service = DataRefreshService(staff_repo, movements_repo, reconciler)

    return Container(
        staff_repo=staff_repo,
        movements_repo=movements_repo,
        auth_service=AuthService(staff_repo),
        staff_service=StaffService(staff_repo),
        movement_service=MovementService(movements_repo, tz=tz),
        presence_service=PresenceService(tz=tz),
        report_service=MovementReportService(tz=tz),
        data_service=data_service,
        refresher=PeriodicRefresher(data_service, interval=refresh_interval),
        tz=tz,
        conn=conn,
    )


def build_container(
    *,
    store_config: dict,
    refresh_interval: float = DEFAULT_REFRESH_SECONDS,
    utc_offset_hours: Optional[float] = None,
) -> Container:
    config = StoreConfig(
        url=str(store_config["url"]),
        timeout=float(store_config.get("timeout", DEFAULT_STORE_TIMEOUT)),
    )
    conn = StoreConnection.get_instance(config)

    return build_services(
        HttpStaffRepository(conn),
        HttpMovementRepository(conn),
        tz=observer_zone(utc_offset_hours),
        executor=ThreadPoolExecutor(max_workers=SYNC_WORKERS, thread_name_prefix="StatusSync-"),
        refresh_interval=refresh_interval,
        conn=conn,
    )
