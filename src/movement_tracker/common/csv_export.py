from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence


def to_csv_bytes(headers: Sequence[str], rows: Iterable[Sequence[object]]) -> bytes:
    """Every field double-quoted, inner quotes doubled.

    Encoded as utf-8-sig so Excel picks up the encoding.
    """
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow(["" if v is None else str(v) for v in row])
    return out.getvalue().encode("utf-8-sig")
