from __future__ import annotations

from enum import Enum


class ShiftWindow(str, Enum):
    """Daily time band used to classify "now" on the dashboard."""

    MORNING = "Morning"
    NOON = "Noon"
    NIGHT = "Night"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class GridState(str, Enum):
    """Lifecycle of the assignment grid for one project/month selection."""

    IDLE = "IDLE"
    LOADING = "LOADING"
    READY = "READY"
    SAVING = "SAVING"
    EXPORTING = "EXPORTING"
