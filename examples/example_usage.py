"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business logic lives in the services.
"""

import importlib

from config import get_settings_module

from movement_tracker.container import build_container
from movement_tracker.reports.window import month_window


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        store_config=settings.STORE_CONFIG,
        utc_offset_hours=settings.LOCAL_UTC_OFFSET_HOURS,
    )

    snap = container.data_service.refresh()
    if snap.network_error:
        print("Store unreachable:", snap.error_message)
        return

    print(container.presence_service.board(snap.staff)["stats"])

    report = container.report_service.build_report(snap.staff, snap.movements, window=month_window(2025, 1))
    for row in report.rows:
        print(row["date_out_display"], row["staff_name"], row["location"], row["time_status"])


if __name__ == "__main__":
    main()
