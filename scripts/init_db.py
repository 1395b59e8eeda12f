from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timetable_system.timetable_system.database.bootstrap import apply_schema
from src.timetable_system.timetable_system.database.connection import DBConfig
from src.timetable_system.timetable_system.logging_config import setup_logging

logger = logging.getLogger("init_db")


def main() -> None:
    setup_logging()
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    count = apply_schema(db_config, schema_path=schema_path)
    logger.info("Applied schema.sql (%s statements) -> %s", count, DBConfig.from_mapping(db_config).describe())


if __name__ == "__main__":
    main()
