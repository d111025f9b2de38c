"""Example: drive the shift grid through the service layer (no Flask).

Loads one project/month, marks a rest day, saves and writes the .xlsx export.
"""

import importlib
import sys
from pathlib import Path

from config import get_settings_module

from src.workforce_dashboard.workforce_dashboard.common.calendar_utils import current_year_month, month_key
from src.workforce_dashboard.workforce_dashboard.container import build_container


def main(project_id: str = "P001") -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, timezone=settings.TIMEZONE)

    year, month = current_year_month(tz=container.tz)
    grid = container.assignment_service.open_grid(project_id, month_key(year, month))
    print("current shift:", grid.current_shift().window.value, grid.current_shift().label)

    rows = grid.rows()
    if rows:
        grid.on_toggle_rest_day(rows[0].employee_id, 1)
        print("saved (inserted)" if grid.on_save().inserted else "saved (updated)")

    result = grid.on_export()
    Path(result.document.filename).write_bytes(result.payload)
    print("wrote", result.document.filename)


if __name__ == "__main__":
    main(*sys.argv[1:2])
