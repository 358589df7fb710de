from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DailySummary, LedgerRow
from .repository import ConsumptionRepository


class MySQLConsumptionRepository(ConsumptionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def register(
        self,
        *,
        employee_id: str,
        cafeteria_id: str,
        consumption_date: date,
        week_id: str,
        day_name: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            # The upsert holds the row lock until commit, so the count read
            # below is the one this call produced.
            cur.execute(
                """
                INSERT INTO consumption_logs(employee_id, comedor_id, consumption_date, week_id, day_name, consumption_count)
                VALUES(%s,%s,%s,%s,%s,1)
                ON DUPLICATE KEY UPDATE consumption_count = consumption_count + 1
                """,
                (employee_id, cafeteria_id, consumption_date, week_id, day_name),
            )
            cur.execute(
                """
                SELECT consumption_count
                FROM consumption_logs
                WHERE employee_id=%s AND comedor_id=%s AND consumption_date=%s
                """,
                (employee_id, cafeteria_id, consumption_date),
            )
            row = fetchone(cur)
            cur.execute(
                # Backfilled dates never move last_active_date backwards.
                "UPDATE empleados SET last_active_date = GREATEST(COALESCE(last_active_date, %s), %s) "
                "WHERE internal_id=%s",
                (consumption_date, consumption_date, employee_id),
            )
            return int(row["consumption_count"])

    def list_week(self, cafeteria_id: str, week_id: str) -> Sequence[LedgerRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT cl.employee_id, e.name AS employee_name, e.number AS employee_number,
                       cl.day_name, cl.consumption_count, cl.consumption_date, cl.week_id
                FROM consumption_logs cl
                LEFT JOIN empleados e ON e.internal_id = cl.employee_id
                WHERE cl.comedor_id=%s AND cl.week_id=%s
                ORDER BY e.name, cl.employee_id, cl.consumption_date
                """,
                (cafeteria_id, week_id),
            )
            return [
                LedgerRow(
                    employee_id=r["employee_id"],
                    employee_name=r["employee_name"],
                    employee_number=r.get("employee_number"),
                    day_name=r["day_name"],
                    count=int(r["consumption_count"]),
                    consumption_date=r["consumption_date"],
                    week_id=r["week_id"],
                )
                for r in fetchall(cur)
            ]

    def daily_summary(self, cafeteria_id: str, week_id: str) -> Sequence[DailySummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT consumption_date, day_name,
                       SUM(consumption_count) AS total_consumos,
                       COUNT(DISTINCT employee_id) AS total_empleados
                FROM consumption_logs
                WHERE comedor_id=%s AND week_id=%s
                GROUP BY consumption_date, day_name
                ORDER BY consumption_date
                """,
                (cafeteria_id, week_id),
            )
            return [
                DailySummary(
                    consumption_date=r["consumption_date"],
                    day_name=r["day_name"],
                    total_count=int(r["total_consumos"] or 0),
                    employee_count=int(r["total_empleados"] or 0),
                )
                for r in fetchall(cur)
            ]

    def clear_week(self, cafeteria_id: str, week_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM consumption_logs WHERE comedor_id=%s AND week_id=%s",
                (cafeteria_id, week_id),
            )
            return int(cur.rowcount)
