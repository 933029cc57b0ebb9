"""Timestamp normalization so stored and requested instants compare safely"""

from datetime import datetime, timezone


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC; aware ones are returned unchanged."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
