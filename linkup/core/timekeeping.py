"""Timekeeping — UTC normalization for stored datetimes.

Invariants:
    - as_utc() never returns a naive datetime
    - Naive inputs are interpreted as UTC (SQLite drops tzinfo on read)
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
