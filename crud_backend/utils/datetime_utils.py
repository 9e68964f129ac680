"""
DateTime Utilities
==================

Timestamps persisted to MongoDB are always UTC. PyMongo/Motor hand BSON dates
back as naive datetimes that represent UTC, so everything read from the store
goes through ensure_utc() before it reaches a response.
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    BSON dates have millisecond precision, so microseconds are truncated to
    keep the value returned on insert equal to the value read back later.
    """
    current = datetime.now(dt_timezone.utc)
    return current.replace(microsecond=(current.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)
