from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TabletConfig
from .repository import TabletRepository

_SELECT = "SELECT tablet_id, active_comedor_id, nickname, updated_at FROM tablet_configs"


def _row_to_tablet(r: dict) -> TabletConfig:
    return TabletConfig(
        tablet_id=r["tablet_id"],
        active_cafeteria_id=r.get("active_comedor_id"),
        nickname=r["nickname"],
        updated_at=r.get("updated_at"),
    )


class MySQLTabletRepository(TabletRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, tablet_id: str) -> Optional[TabletConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE tablet_id=%s", (tablet_id,))
            r = fetchone(cur)
            return _row_to_tablet(r) if r else None

    def list_all(self) -> Sequence[TabletConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY updated_at DESC")
            return [_row_to_tablet(r) for r in fetchall(cur)]

    def upsert(self, *, tablet_id: str, active_cafeteria_id: Optional[str], nickname: str) -> TabletConfig:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tablet_configs(tablet_id, active_comedor_id, nickname)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    active_comedor_id = VALUES(active_comedor_id),
                    nickname = VALUES(nickname),
                    updated_at = CURRENT_TIMESTAMP
                """,
                (tablet_id, active_cafeteria_id, nickname),
            )
            cur.execute(_SELECT + " WHERE tablet_id=%s", (tablet_id,))
            return _row_to_tablet(fetchone(cur))

    def delete_by_id(self, tablet_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tablet_configs WHERE tablet_id=%s", (tablet_id,))
            return cur.rowcount > 0

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tablet_configs")
            return int(cur.rowcount)
