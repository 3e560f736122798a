"""Calendar-date helpers.

Every date comparison in the application is done on canonical ``YYYY-MM-DD``
strings. Input comes from a date picker, from spreadsheet cells with
inconsistent formatting and from legacy rows, so :func:`normalize_date`
tries a fixed list of recognisers in order. The order matters: inputs such
as ``02-03-2025`` are ambiguous and only the precedence decides them.
"""
from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Optional

_INVISIBLE_CHARS = re.compile("[\\u200b-\\u200f\\u2060\\ufeff]")

_DAY_FIRST = re.compile(r"^(\d{1,4})\s*[-/]\s*(\d{1,2})\s*[-/]\s*(\d{4})$")
_YEAR_FIRST = re.compile(r"^(\d{4})\s*[-/]\s*(\d{1,2})\s*[-/]\s*(\d{1,2})$")

# Offsets written "+0800" and fractions other than 3 or 6 digits, both refused by
# fromisoformat before 3.11.
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")
_FRACTION = re.compile(r"\.(\d+)")

# Browser Date.toString() output, e.g. "Sat Feb 01 2025 00:00:00 GMT+0800 (Malaysia Time)"
_JS_DATE_STRING = re.compile(r"^(\w{3} \w{3} \d{1,2} \d{4} \d{2}:\d{2}:\d{2}) GMT([+-]\d{4})")

_FALLBACK_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y.%m.%d",
    "%d.%m.%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%a %b %d %Y",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def observer_zone(utc_offset_hours: Optional[float]) -> Optional[tzinfo]:
    """Fixed-offset zone for the configured observer, or None for host local time."""
    if utc_offset_hours is None:
        return None
    return timezone(timedelta(hours=float(utc_offset_hours)))


def today_iso(today: Any = None, *, tz: Optional[tzinfo] = None) -> str:
    """Canonical form of "today", or of an explicit reference date."""
    if today is None:
        return now_local(tz).date().isoformat()
    return normalize_date(today, tz=tz)


def _format_ymd(year: str, month: str, day: str) -> str:
    return f"{int(year):04d}-{int(month):02d}-{int(day):02d}"


def _local_date(dt: datetime, tz: Optional[tzinfo]) -> str:
    if dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    return dt.date().isoformat()


def _iso_candidate(text: str) -> str:
    # fromisoformat only learned the "Z" suffix in 3.11
    candidate = text[:-1] + "+00:00" if text.endswith("Z") else text
    if "T" not in candidate:
        return candidate
    candidate = _COMPACT_OFFSET.sub(r"\1:\2", candidate)
    return _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], candidate, count=1)


def _parse_timestamp(text: str) -> Optional[datetime]:
    candidate = _iso_candidate(text)
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        pass

    m = _JS_DATE_STRING.match(text)
    if m:
        try:
            return datetime.strptime(f"{m.group(1)} {m.group(2)}", "%a %b %d %Y %H:%M:%S %z")
        except ValueError:
            return None
    return None


def _parse_generic(text: str) -> Optional[datetime]:
    parsed = _parse_timestamp(text)
    if parsed is not None:
        return parsed

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def normalize_date(value: Any, *, tz: Optional[tzinfo] = None) -> str:
    """Normalize a loosely formatted date into ``YYYY-MM-DD``.

    Returns ``""`` for ``None``. When nothing recognises the input, the
    trimmed original is returned unchanged so callers keep working on a
    best-effort basis instead of failing.

    ``tz`` is the observer's zone used for timestamps that carry an offset;
    ``None`` means the host's local time.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return _local_date(value, tz)
    if isinstance(value, date):
        return value.isoformat()

    text = _INVISIBLE_CHARS.sub("", str(value)).strip()
    if not text:
        return ""

    # 1. UTC / offset timestamps, typically spreadsheet midnights exported as UTC.
    if "T" in text and ("Z" in text or "+" in text):
        parsed = _parse_timestamp(text)
        if parsed is not None:
            return _local_date(parsed, tz)

    # 2. Day-first: D/M/YYYY
    m = _DAY_FIRST.match(text)
    if m:
        day, month, year = m.groups()
        return _format_ymd(year, month, day)

    # 3. Year-first: YYYY/M/D
    m = _YEAR_FIRST.match(text)
    if m:
        year, month, day = m.groups()
        return _format_ymd(year, month, day)

    # 4. Anything else the parser understands.
    parsed = _parse_generic(text)
    if parsed is not None:
        return _local_date(parsed, tz)
    return text


def is_canonical_date(value: str) -> bool:
    try:
        return parse_iso_date(value).isoformat() == value
    except (TypeError, ValueError):
        return False


def format_display_date(value: Any, *, tz: Optional[tzinfo] = None) -> str:
    """DD/MM/YYYY for screens and printed reports; "-" when missing."""
    canonical = normalize_date(value, tz=tz)
    if not canonical:
        return "-"
    parts = canonical.split("-")
    if len(parts) != 3:
        return canonical
    return f"{parts[2]}/{parts[1]}/{parts[0]}"


def month_bounds(year: int, month_index: int) -> tuple[str, str]:
    """First and last calendar day of a month; ``month_index`` is 0-based."""
    if not 0 <= int(month_index) <= 11:
        raise ValueError(f"month index out of range: {month_index!r}")
    first = date(int(year), int(month_index) + 1, 1)
    next_first = date(first.year + 1, 1, 1) if first.month == 12 else date(first.year, first.month + 1, 1)
    last = next_first - timedelta(days=1)
    return first.isoformat(), last.isoformat()
