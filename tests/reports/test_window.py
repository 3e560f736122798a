import pytest

from movement_tracker.core.exceptions import ValidationError
from movement_tracker.reports.window import month_window, range_window


def test_month_window_february_leap_year():
    w = month_window(2024, 1)
    assert (w.start, w.end) == ("2024-02-01", "2024-02-29")
    assert w.title == "Februari 2024"
    assert w.is_monthly


def test_month_window_february_common_year():
    assert month_window(2025, 1).end == "2025-02-28"


def test_month_window_rejects_bad_month():
    with pytest.raises(ValidationError):
        month_window(2025, 12)


def test_range_window():
    w = range_window("2025-01-15", "2025-02-15")
    assert (w.start, w.end) == ("2025-01-15", "2025-02-15")
    assert not w.is_monthly


@pytest.mark.parametrize(
    "start, end",
    [("2025-02-15", "2025-01-15"), ("15/01/2025", "2025-02-15"), ("", "2025-02-15")],
)
def test_range_window_rejects_bad_input(start, end):
    with pytest.raises(ValidationError):
        range_window(start, end)
