from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.workforce_dashboard.workforce_dashboard.database.bootstrap import apply_seed_sql
from src.workforce_dashboard.workforce_dashboard.database.connection import DBConfig
from src.workforce_dashboard.workforce_dashboard.main import configure_logging

logger = logging.getLogger("seed_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    logger.info("Seeded database -> %s", DBConfig.from_mapping(db_config).display)


if __name__ == "__main__":
    main()
