from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .cafeterias.controller import register as register_cafeterias
from .companies.controller import register as register_companies
from .consumption.controller import register as register_consumption
from .container import Container, build_container
from .core.constants import DEFAULT_EVENT_QUEUE_SIZE, INACTIVITY_THRESHOLD_DAYS
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_company, list_tables
from .employees.controller import register as register_employees
from .health.controller import register as register_health
from .history.controller import register as register_history
from .tablets.controller import register as register_tablets

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def load_settings():
    load_dotenv(override=False)
    settings_module = get_settings_module()
    return settings_module, importlib.import_module(settings_module)


def configure_logging(settings) -> None:
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    settings_module, settings = load_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False
    app.config["EVENT_HEARTBEAT_SECONDS"] = float(getattr(settings, "EVENT_HEARTBEAT_SECONDS", 15))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_company(db_config)
            logger.info("Demo seed ready")

        container = build_container(
            db_config=db_config,
            inactivity_threshold_days=int(getattr(settings, "INACTIVITY_THRESHOLD_DAYS", INACTIVITY_THRESHOLD_DAYS)),
            event_queue_size=int(getattr(settings, "EVENT_QUEUE_SIZE", DEFAULT_EVENT_QUEUE_SIZE)),
        )

    app.extensions["comedor_container"] = container

    register_health(app, container)
    register_companies(app, container)
    register_cafeterias(app, container)
    register_employees(app, container)
    register_consumption(app, container)
    register_history(app, container)
    register_tablets(app, container)

    return app
