"""Calendar helpers keyed on zero-based month indexes (0 = January)."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import now_local, to_wall_clock
from .validators import require_month_index

_MONTH_KEY_RE = re.compile(r"^(\d{1,4})-(\d{2})$")


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``.

    Computed as the day before the first of the following month, so February
    follows the proleptic Gregorian leap-year rule. December is always 31,
    which keeps year 9999 in range.
    """
    month = require_month_index(month)
    if month == 11:
        return 31
    return (date(year, month + 2, 1) - timedelta(days=1)).day


def month_key(year: int, month: int) -> str:
    month = require_month_index(month)
    return f"{int(year)}-{month + 1:02d}"


def parse_month_key(value: str) -> tuple[int, int]:
    """Inverse of :func:`month_key`: ``"2025-10"`` -> ``(2025, 9)``."""
    m = _MONTH_KEY_RE.match((value or "").strip())
    if not m:
        raise ValidationError(f"Month key must look like YYYY-MM, got {value!r}")
    year, month = int(m.group(1)), int(m.group(2)) - 1
    return year, require_month_index(month)


def current_year_month(now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> tuple[int, int]:
    now = to_wall_clock(now, tz) if now is not None else now_local(tz)
    return now.year, now.month - 1


def day_columns(year: int, month: int) -> list[str]:
    """Day-number keys ``"1".."N"`` used verbatim in each employee's day map."""
    return [str(day) for day in range(1, days_in_month(year, month) + 1)]
