"""Settings shared by every environment; env vars override the defaults."""

import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_db"),
}

# Operating timezone for shift windows and the current month.
TIMEZONE = os.getenv("TIMEZONE", "Asia/Colombo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
