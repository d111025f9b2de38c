import os

from config.config import DB_CONFIG, TIMEZONE  # noqa: F401

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = "DEBUG"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
