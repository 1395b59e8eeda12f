from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.settings import TimetableSettings, require_setting
from .database.bootstrap import apply_schema
from .database.connection import DBConfig
from .logging_config import setup_logging
from .timetable.controller import register as register_timetable

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    timetable_settings = TimetableSettings.from_module(settings)
    setup_logging(timetable_settings.log_level)

    app.secret_key = require_setting(settings, "SECRET_KEY")
    db_config = require_setting(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)

    container = build_container(db_config=db_config, settings=timetable_settings)
    register_timetable(app, container)

    return app
