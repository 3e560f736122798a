from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import is_canonical_date, month_bounds
from ..core.constants import MONTH_NAMES
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ReportWindow:
    """Inclusive reporting interval on canonical dates."""

    start: str
    end: str
    year: Optional[int] = None
    month_index: Optional[int] = None

    @property
    def is_monthly(self) -> bool:
        return self.month_index is not None

    @property
    def title(self) -> str:
        if self.year is not None and self.month_index is not None:
            return f"{MONTH_NAMES[self.month_index]} {self.year}"
        return f"{self.start} - {self.end}"


def month_window(year: int, month_index: int) -> ReportWindow:
    """Whole calendar month; ``month_index`` is 0-based (0 = January)."""
    try:
        start, end = month_bounds(int(year), int(month_index))
    except (TypeError, ValueError) as e:
        raise ValidationError("Bulan atau tahun tidak sah") from e
    return ReportWindow(start=start, end=end, year=int(year), month_index=int(month_index))


def range_window(start: str, end: str) -> ReportWindow:
    start = (start or "").strip()
    end = (end or "").strip()
    if not is_canonical_date(start) or not is_canonical_date(end):
        raise ValidationError("Tarikh mesti dalam format YYYY-MM-DD")
    if start > end:
        raise ValidationError("Tarikh mula tidak boleh selepas tarikh akhir")
    return ReportWindow(start=start, end=end)
