"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Shift window boundaries, minutes since midnight.
MORNING_START_MINUTES = 5 * 60 + 30
NOON_START_MINUTES = 13 * 60 + 30
NIGHT_START_MINUTES = 21 * 60 + 30

DEFAULT_TIMEZONE = "Asia/Colombo"

REST_DAY = "RD"
TIME_RANGE_SEPARATOR = "-"

EXPORT_EMPTY_CELL = "-"
EXPORT_SHEET_NAME = "Shift Schedule"
EXPORT_EMPLOYEE_ID_COLUMN = "EmployeeId"
EXPORT_EMPLOYEE_NAME_COLUMN = "EmployeeName"
