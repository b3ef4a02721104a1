"""Date and clock helpers.

Session dates are calendar dates in UTC. Timestamps on the persisted
snapshot are integer milliseconds since the epoch.
"""

from __future__ import annotations

import time
from datetime import UTC, date, datetime


def today_utc() -> date:
    return datetime.now(UTC).date()


def now_ms() -> int:
    return int(time.time() * 1000)


def parse_iso_date(value: object) -> date | None:
    """Parse a YYYY-MM-DD value (or the date part of an ISO datetime).

    Args:
        value: Raw value from persisted state

    Returns:
        Parsed date, or None when the value is missing or unparseable
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None
