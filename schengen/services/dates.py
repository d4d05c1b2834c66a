"""Calendar-day helpers. Compliance math works on dates, never on timestamps."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterator

from schengen.errors import InvalidReferenceDateError

_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%Y/%m/%d")


def to_date(value: date | datetime) -> date:
    """Calendar day of a date or datetime. Aware datetimes are taken in UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def parse_date(value: str) -> date:
    value = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Invalid date format: {value}. Use YYYY-MM-DD (e.g., 2025-11-01)")


def require_reference_date(value: Any, what: str = "Reference date") -> date:
    """Return value as a calendar day or raise InvalidReferenceDateError. None is never replaced with today."""
    if value is None:
        raise InvalidReferenceDateError(value, f"{what} is required")
    if not isinstance(value, date):
        raise InvalidReferenceDateError(value, f"{what} must be a date, got {type(value).__name__}")
    return to_date(value)


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def days_between(later: date, earlier: date) -> int:
    return (later - earlier).days


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every day from start to end, both inclusive. Empty if end < start."""
    current = start
    one = timedelta(days=1)
    while current <= end:
        yield current
        current += one
