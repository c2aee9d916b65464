"""
UTC datetime utilities for consistent timezone handling.

Timestamps read from the database are normalized with ensure_utc; stored
names are prefixed with current_millis().
"""

import time
from datetime import UTC, datetime


def current_millis() -> int:
    """Return the current Unix time in milliseconds (used to prefix stored names)."""
    return time.time_ns() // 1_000_000


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes
    (SQLite returns naive values for timezone-aware columns).

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)
