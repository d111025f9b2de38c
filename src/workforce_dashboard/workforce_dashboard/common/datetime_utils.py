from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current time in ``tz`` (system local time when ``tz`` is None); tests patch this."""
    return datetime.now(tz)


def to_wall_clock(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Express ``value`` in the operating timezone.

    Naive datetimes are already wall-clock time and are returned unchanged.
    """
    if tz is None or value.tzinfo is None:
        return value
    return value.astimezone(tz)
