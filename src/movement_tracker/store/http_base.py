from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, List

import requests

from ..core.constants import DEFAULT_RANK
from ..core.exceptions import StoreError
from .connection import StoreConnection

logger = logging.getLogger(__name__)

# text/plain keeps the script host from demanding a CORS preflight.
POST_HEADERS = {"Content-Type": "text/plain;charset=utf-8"}


def _cache_buster() -> int:
    return int(time.time() * 1000)


def fetch_rows(conn: StoreConnection, action: str) -> List[Dict[str, Any]]:
    """GET one sheet as a list of row dicts.

    A payload that is not a JSON list (error page, empty sheet object) is
    treated as "no rows".
    """
    try:
        resp = conn.session.get(
            conn.url,
            params={"action": action, "_t": _cache_buster()},
            timeout=conn.timeout,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        raise StoreError(f"{action} failed: {e}") from e

    if not isinstance(data, list):
        logger.warning("%s returned %s instead of a list", action, type(data).__name__)
        return []
    return [row for row in data if isinstance(row, dict)]


def send_action(conn: StoreConnection, action: str, payload: Dict[str, Any]) -> None:
    """POST a write action ({"action": ..., "payload": ...}) to the store."""
    try:
        resp = conn.session.post(
            conn.url,
            data=json.dumps({"action": action, "payload": payload}),
            headers=POST_HEADERS,
            timeout=conn.timeout,
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        raise StoreError(f"{action} failed: {e}") from e
    logger.debug("%s sent (id=%s)", action, payload.get("id"))


def as_text(value: Any, *, strip: bool = False) -> str:
    """Coerce a sheet cell to str; None/empty become ""."""
    if value is None:
        return ""
    text = str(value)
    return text.strip() if strip else text


def parse_rank(value: Any) -> int:
    """Rank cells may hold 1, "1", "" or nothing. Missing sorts last."""
    if value is None or value == "":
        return DEFAULT_RANK
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_RANK


def new_record_id(prefix: str = "") -> str:
    return f"{prefix}{_cache_buster()}"
