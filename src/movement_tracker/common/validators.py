from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import is_canonical_date, normalize_date


def as_form_text(value) -> str:
    """JSON bodies may carry numbers where text is expected (e.g. 1234 as a password)."""
    return "" if value is None else str(value)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} wajib diisi")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} mesti sekurang-kurangnya {min_len} aksara")
    return value


def require_date(value: str, field_name: str) -> str:
    """Normalize a form date and reject anything that is not a real calendar day."""
    canonical = normalize_date(require_non_empty(value, field_name))
    if not is_canonical_date(canonical):
        raise ValidationError(f"{field_name} tidak sah")
    return canonical


def require_date_order(date_out: str, date_return: str) -> None:
    if date_out > date_return:
        raise ValidationError("Tarikh Keluar tidak boleh selepas Tarikh Balik.")
