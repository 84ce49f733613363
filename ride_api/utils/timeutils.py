# path: ride-tracker-api/ride_api/utils/timeutils.py

from __future__ import annotations

from datetime import datetime, timezone
import math


def ensure_aware(dt: datetime) -> datetime:
    # Store timestamps without an offset are UTC.
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def duration_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two timestamps, halves rounded up."""
    minutes = (ensure_aware(end) - ensure_aware(start)).total_seconds() / 60.0
    return int(math.floor(minutes + 0.5))


def format_timestamp(dt: datetime) -> str:
    return ensure_aware(dt).strftime("%m/%d/%Y, %I:%M:%S %p")
