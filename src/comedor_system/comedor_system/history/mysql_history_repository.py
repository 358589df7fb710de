from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import ConsumptionHistory, HistoryDetail
from .repository import HistoryRepository

_SELECT = "SELECT id, comedor_id, week_id, total_count, employee_count, archived_at FROM consumption_histories"


def _row_to_history(r: dict) -> ConsumptionHistory:
    return ConsumptionHistory(
        history_id=int(r["id"]),
        cafeteria_id=r["comedor_id"],
        week_id=r["week_id"],
        total_count=int(r["total_count"] or 0),
        employee_count=int(r["employee_count"] or 0),
        archived_at=r.get("archived_at"),
    )


class MySQLHistoryRepository(HistoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_from_ledger(self, cafeteria_id: str, week_id: str) -> Optional[ConsumptionHistory]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                # uq_history_comedor_week makes this insert the idempotence check.
                cur.execute(
                    "INSERT INTO consumption_histories(comedor_id, week_id) VALUES(%s,%s)",
                    (cafeteria_id, week_id),
                )
                history_id = int(cur.lastrowid)

                cur.execute(
                    """
                    INSERT INTO consumption_history_details
                        (history_id, employee_id, employee_name, employee_number, consumption_count)
                    SELECT %s, cl.employee_id, MAX(e.name), MAX(e.number), SUM(cl.consumption_count)
                    FROM consumption_logs cl
                    LEFT JOIN empleados e ON e.internal_id = cl.employee_id
                    WHERE cl.comedor_id=%s AND cl.week_id=%s
                    GROUP BY cl.employee_id
                    HAVING SUM(cl.consumption_count) > 0
                    """,
                    (history_id, cafeteria_id, week_id),
                )
                cur.execute(
                    """
                    UPDATE consumption_histories
                    SET total_count = (
                            SELECT COALESCE(SUM(d.consumption_count), 0)
                            FROM consumption_history_details d WHERE d.history_id=%s
                        ),
                        employee_count = (
                            SELECT COUNT(*) FROM consumption_history_details d WHERE d.history_id=%s
                        )
                    WHERE id=%s
                    """,
                    (history_id, history_id, history_id),
                )
                cur.execute(_SELECT + " WHERE id=%s", (history_id,))
                return _row_to_history(fetchone(cur))
        except Exception as e:
            if is_duplicate_key(e):
                return None
            raise

    def get_by_week(self, cafeteria_id: str, week_id: str) -> Optional[ConsumptionHistory]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE comedor_id=%s AND week_id=%s", (cafeteria_id, week_id))
            r = fetchone(cur)
            return _row_to_history(r) if r else None

    def get_by_id(self, history_id: int) -> Optional[ConsumptionHistory]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (int(history_id),))
            r = fetchone(cur)
            return _row_to_history(r) if r else None

    def list_for_cafeteria(self, cafeteria_id: str, *, limit: int) -> Sequence[ConsumptionHistory]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE comedor_id=%s ORDER BY archived_at DESC, id DESC LIMIT %s",
                (cafeteria_id, int(limit)),
            )
            return [_row_to_history(r) for r in fetchall(cur)]

    def list_details(self, history_id: int) -> Sequence[HistoryDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT history_id, employee_id, employee_name, employee_number, consumption_count
                FROM consumption_history_details
                WHERE history_id=%s
                ORDER BY employee_name, employee_id
                """,
                (int(history_id),),
            )
            return [
                HistoryDetail(
                    history_id=int(r["history_id"]),
                    employee_id=r["employee_id"],
                    employee_name=r.get("employee_name"),
                    employee_number=r.get("employee_number"),
                    count=int(r["consumption_count"]),
                )
                for r in fetchall(cur)
            ]
