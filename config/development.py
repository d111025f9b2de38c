import os

from config.config import DB_CONFIG, LOG_LEVEL, TIMEZONE  # noqa: F401

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Startup runs database/schema.sql (CREATE TABLE IF NOT EXISTS only).
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Startup also loads database/seed.sql demo rows.
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
