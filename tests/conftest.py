from __future__ import annotations

from datetime import date, timedelta, timezone

import pytest

MYT = timezone(timedelta(hours=8))


@pytest.fixture
def myt():
    """Observer zone used by the spreadsheet owners (UTC+8)."""
    return MYT


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 3, 3)
