from __future__ import annotations

from flask import Flask

from ..common.calendar_utils import current_year_month, days_in_month, month_key
from ..common.datetime_utils import now_local
from ..common.responses import json_errors, ok
from ..container import Container
from .windows import SHIFT_WINDOW_SPANS, current_shift_window, shift_window_span


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shift/current", methods=["GET"], endpoint="api_current_shift")
    @json_errors
    def api_current_shift():
        now = now_local(container.tz)
        span = shift_window_span(current_shift_window(now, tz=container.tz))
        year, month = current_year_month(now, tz=container.tz)
        return ok(
            {
                "shift": span.window.value,
                "code": span.code,
                "range": span.label,
                "monthYear": month_key(year, month),
                "daysInMonth": days_in_month(year, month),
                "now": now.isoformat(timespec="seconds"),
            }
        )

    @app.route("/api/shift/windows", methods=["GET"], endpoint="api_shift_windows")
    @json_errors
    def api_shift_windows():
        return ok(
            [
                {
                    "shift": s.window.value,
                    "code": s.code,
                    "start": s.start_time.strftime("%H:%M"),
                    "end": s.end_time.strftime("%H:%M"),
                    "range": s.label,
                }
                for s in SHIFT_WINDOW_SPANS.values()
            ]
        )
