"""Export one group's monthly timetable to an .xlsx file.

Usage: python scripts/export_timetable.py --group 3 --month 2024-03 [--out DIR]
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timetable_system.timetable_system.common.validators import parse_month
from src.timetable_system.timetable_system.container import build_container
from src.timetable_system.timetable_system.core.settings import TimetableSettings
from src.timetable_system.timetable_system.logging_config import setup_logging

logger = logging.getLogger("export_timetable")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--group", required=True, help="staff group id")
    parser.add_argument("--month", required=True, help="YYYY-MM or YYYY-MM-DD")
    parser.add_argument("--week-start-day", type=int, default=None, help="1=Sunday .. 7=Saturday")
    parser.add_argument("--out", default=".", help="output directory")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    timetable_settings = TimetableSettings.from_module(settings)
    setup_logging(timetable_settings.log_level)

    container = build_container(db_config=dict(settings.DB_CONFIG), settings=timetable_settings)
    export = container.timetable_service.export_month(
        month_ref=parse_month(args.month),
        group_id=args.group,
        week_start_day=args.week_start_day,
    )

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    target = out_dir / export.file_name
    target.write_bytes(export.content)
    logger.info("Wrote %s", target)


if __name__ == "__main__":
    main()
