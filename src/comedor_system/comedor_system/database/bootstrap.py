"""Apply ``database/schema.sql`` and ``database/seed.sql`` to the configured MySQL server.

Used by ``create_app`` (AUTO_INIT_DB / AUTO_SEED_DB) and by the scripts in
``scripts/``. Scripts are executed statement by statement; every statement in
the bundled files ends with ``;`` at the end of a line.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

DEMO_COMPANY_ID = "empresa_demo_01"

_DB_SELECTION = re.compile(r"^(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


def _as_config(db_config: dict) -> DBConfig:
    return DBConfig.from_mapping(db_config)


def _open(config: DBConfig, *, select_db: bool = True):
    params = {
        "host": config.host,
        "port": config.port,
        "user": config.user,
        "password": config.password,
        "connection_timeout": config.connect_timeout,
    }
    if select_db:
        params["database"] = config.database
    return mysql.connector.connect(**params)


def read_statements(path: str | Path) -> Iterator[str]:
    """Statements of a .sql file, without comments.

    ``CREATE DATABASE`` / ``USE`` lines are skipped: the configured database wins.
    """
    pending: list[str] = []
    for raw in Path(path).read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("--"):
            continue
        pending.append(line)
        if line.endswith(";"):
            stmt = " ".join(pending).rstrip(";").strip()
            pending = []
            if stmt and not _DB_SELECTION.match(stmt):
                yield stmt
    if pending:
        yield " ".join(pending)


def _execute_file(db_config: dict, path: str | Path) -> int:
    config = _as_config(db_config)
    conn = _open(config)
    try:
        cur = conn.cursor()
        executed = 0
        for stmt in read_statements(path):
            cur.execute(stmt)
            executed += 1
        conn.commit()
    finally:
        conn.close()
    logger.info("%s: %d statements applied to %s", Path(path).name, executed, config.database)
    return executed


def ensure_database_exists(db_config: dict) -> None:
    config = _as_config(db_config)
    conn = _open(config, select_db=False)
    try:
        conn.cursor().execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _execute_file(db_config, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _execute_file(db_config, seed_path)


def ensure_demo_company(db_config: dict) -> None:
    """Guarantee the demo company and attach cafeterias without company to it."""
    conn = _open(_as_config(db_config))
    try:
        cur = conn.cursor()
        cur.execute(
            "INSERT IGNORE INTO empresas (id, nombre, descripcion, activa) "
            "VALUES (%s, 'Empresa Demo', 'Empresa de demostración del sistema', 1)",
            (DEMO_COMPANY_ID,),
        )
        cur.execute(
            "UPDATE comedores SET empresa_id=%s WHERE empresa_id IS NULL OR empresa_id=''",
            (DEMO_COMPANY_ID,),
        )
        if cur.rowcount:
            logger.info("Assigned %d cafeterias to %s", cur.rowcount, DEMO_COMPANY_ID)
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _open(_as_config(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())
    finally:
        conn.close()
