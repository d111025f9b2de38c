"""String encoding of shift cells.

Cells travel as plain strings (API payloads, spreadsheet export) and are
handled as :data:`ShiftCell` variants everywhere else. Decoding never raises:
legacy or corrupted values come back as :class:`Unset`.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from ..core.constants import REST_DAY, TIME_RANGE_SEPARATOR
from .model import RestDay, ShiftCell, TimeRange, Unset

_TIME_RE = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")


def is_valid_time(value: str) -> bool:
    return bool(_TIME_RE.match(value or ""))


def encode_time_range(start: str, end: str) -> str:
    """Encode a start/end pair.

    A one-sided pair keeps its separator (``"09:00-"`` / ``"-17:00"``) so the
    side that is filled in survives a decode.
    """
    start = (start or "").strip()
    end = (end or "").strip()
    if not start and not end:
        return ""
    return f"{start}{TIME_RANGE_SEPARATOR}{end}"


def encode_cell(cell: ShiftCell) -> str:
    if isinstance(cell, RestDay):
        return REST_DAY
    if isinstance(cell, TimeRange):
        return encode_time_range(cell.start, cell.end)
    return ""


def decode_cell(value: Any) -> ShiftCell:
    if not isinstance(value, str):
        return Unset()

    v = value.strip()
    if v == REST_DAY:
        return RestDay()
    if not v or v == TIME_RANGE_SEPARATOR:
        return Unset()

    if TIME_RANGE_SEPARATOR not in v:
        # Bare "HH:MM" written by older clients before the end time was known.
        return TimeRange(start=v) if is_valid_time(v) else Unset()

    start, _, end = v.partition(TIME_RANGE_SEPARATOR)
    start, end = start.strip(), end.strip()
    if TIME_RANGE_SEPARATOR in end:
        return Unset()
    if (start and not is_valid_time(start)) or (end and not is_valid_time(end)):
        return Unset()
    return TimeRange(start=start, end=end)


def normalize_cell_value(value: Any) -> str:
    return encode_cell(decode_cell(value))


def split_time_range(value: Any) -> tuple[str, str]:
    cell = decode_cell(value)
    if isinstance(cell, TimeRange):
        return cell.start, cell.end
    return "", ""


def is_rest_day(value: Any) -> bool:
    return isinstance(decode_cell(value), RestDay)


def toggle_rest_day(value: Any) -> str:
    """Flip between rest day and unassigned.

    Any time range present is discarded; toggling back yields ``""``.
    """
    return "" if is_rest_day(value) else REST_DAY


def edit_time_bound(value: Any, *, start: Optional[str] = None, end: Optional[str] = None) -> str:
    """Replace one or both sides of a time range, keeping the other side."""
    current_start, current_end = split_time_range(value)
    new_start = current_start if start is None else start.strip()
    new_end = current_end if end is None else end.strip()
    if (new_start and not is_valid_time(new_start)) or (new_end and not is_valid_time(new_end)):
        return normalize_cell_value(value)
    return encode_time_range(new_start, new_end)
