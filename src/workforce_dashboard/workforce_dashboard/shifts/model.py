from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..core.enums import ShiftWindow


@dataclass(frozen=True)
class ShiftWindowSpan:
    """Fixed daily time band: start inclusive, end exclusive."""

    window: ShiftWindow
    code: str
    start_time: time
    end_time: time

    @property
    def wraps_midnight(self) -> bool:
        return self.end_time <= self.start_time

    @property
    def label(self) -> str:
        return f"{_fmt_12h(self.start_time)} - {_fmt_12h(self.end_time)}"


def _fmt_12h(t: time) -> str:
    hour = t.hour % 12 or 12
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{hour}:{t.minute:02d} {suffix}"
