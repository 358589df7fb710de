"""Weekly archive job.

Meant to be run by cron (or any scheduler) once the week closes, e.g. Sunday
night. Archives the current week of every cafeteria, prints the JSON report and
exits non-zero only when the run itself could not complete. Per-cafeteria
failures are reported in the JSON but do not change the exit code.

    python scripts/archive_week.py              # current week
    python scripts/archive_week.py --week 2024-6-3
"""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.comedor_system.comedor_system.container import build_container

logger = logging.getLogger("archive_week")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Archive the weekly consumption ledger of every cafeteria.")
    parser.add_argument("--week", dest="week_id", default=None, help="week id (Monday, e.g. 2024-6-3); default: current")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        container = build_container(db_config=dict(settings.DB_CONFIG))
        report = container.history_archiver.archive_all(args.week_id)
    except Exception as e:
        logger.exception("Weekly archive run failed")
        print(json.dumps({"success": False, "error": str(e)}, ensure_ascii=False))
        return 1

    print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
