from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime, str]

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    A trailing time part (``2024-01-15T10:30:00``) is allowed and ignored.
    Basic (``20240115``) and week (``2024-W03-1``) forms are rejected.
    """
    date_part = value.strip().partition("T")[0]
    if not _ISO_DATE_RE.fullmatch(date_part):
        raise ValueError(f"not a YYYY-MM-DD date: {value!r}")
    return datetime.strptime(date_part, "%Y-%m-%d").date()


def coerce_date(value: Optional[DateLike]) -> Optional[date]:
    """Best-effort conversion to ``date``; returns None when not possible."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        return None
