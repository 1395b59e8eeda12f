import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timetable_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

WEEK_START_DAY = os.getenv("WEEK_START_DAY", "7")
HOLIDAY_COLOR = os.getenv("HOLIDAY_COLOR", "#f44336")
INCLUDE_MARKER_ONLY_DAYS = bool(int(os.getenv("INCLUDE_MARKER_ONLY_DAYS", "1")))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
