from __future__ import annotations

from datetime import datetime

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone


class HealthService:
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def ping(self) -> datetime:
        """Database server time; raises StorageUnavailableError when unreachable."""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT NOW() AS now")
            return fetchone(cur)["now"]
