from __future__ import annotations

from datetime import datetime, time, tzinfo
from typing import Optional

from ..common.datetime_utils import now_local, to_wall_clock
from ..core.constants import MORNING_START_MINUTES, NIGHT_START_MINUTES, NOON_START_MINUTES
from ..core.enums import ShiftWindow
from .model import ShiftWindowSpan

SHIFT_WINDOW_SPANS: dict[ShiftWindow, ShiftWindowSpan] = {
    ShiftWindow.MORNING: ShiftWindowSpan(ShiftWindow.MORNING, "A", time(5, 30), time(13, 30)),
    ShiftWindow.NOON: ShiftWindowSpan(ShiftWindow.NOON, "B", time(13, 30), time(21, 30)),
    ShiftWindow.NIGHT: ShiftWindowSpan(ShiftWindow.NIGHT, "C", time(21, 30), time(5, 30)),
}

# Single-letter codes used by older shift grids.
LEGACY_SHIFT_CODES: dict[str, ShiftWindow] = {span.code: w for w, span in SHIFT_WINDOW_SPANS.items()}


def classify_minutes(total_minutes: int) -> ShiftWindow:
    if MORNING_START_MINUTES <= total_minutes < NOON_START_MINUTES:
        return ShiftWindow.MORNING
    if NOON_START_MINUTES <= total_minutes < NIGHT_START_MINUTES:
        return ShiftWindow.NOON
    return ShiftWindow.NIGHT


def current_shift_window(now: Optional[datetime] = None, *, tz: Optional[tzinfo] = None) -> ShiftWindow:
    """Shift window containing ``now`` (defaults to the current local time).

    Aware datetimes are converted to ``tz`` first; seconds are ignored, so
    05:30:00 and 05:30:59 both fall into the Morning window.
    """
    now = to_wall_clock(now, tz) if now is not None else now_local(tz)
    return classify_minutes(now.hour * 60 + now.minute)


def shift_window_span(window: ShiftWindow) -> ShiftWindowSpan:
    return SHIFT_WINDOW_SPANS[ShiftWindow(window)]


def window_for_code(code: str) -> Optional[ShiftWindow]:
    return LEGACY_SHIFT_CODES.get((code or "").strip().upper())
