"""Backup the staff and movement sheets.

Note: dumps what the store returns right now into backups/<timestamp>.json.
Passwords are included, keep the file somewhere safe.
"""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from config import get_settings_module

from movement_tracker.common.logging_utils import configure_logging
from movement_tracker.core.exceptions import StoreError
from movement_tracker.movements.http_movement_repository import HttpMovementRepository, movement_to_row
from movement_tracker.staff.http_staff_repository import HttpStaffRepository, staff_to_row
from movement_tracker.store.connection import StoreConfig, StoreConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    store = settings.STORE_CONFIG

    conn = StoreConnection(StoreConfig(url=store["url"], timeout=float(store.get("timeout", 30))))
    try:
        staff = HttpStaffRepository(conn).list_all()
        movements = HttpMovementRepository(conn).list_all()
    except StoreError as e:
        raise SystemExit(f"Backup failed: {e}")
    finally:
        conn.close()

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"sppks_{ts}.json"
    payload = {
        "created_at": datetime.now().isoformat(timespec="seconds"),
        "staff": [staff_to_row(s) for s in staff],
        "movements": [movement_to_row(m) for m in movements],
    }
    out_file.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(staff)} staff, {len(movements)} movements)")


if __name__ == "__main__":
    main()
