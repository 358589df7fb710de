from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Company, CompanyStats
from .repository import CompanyRepository


def _row_to_company(r: dict) -> Company:
    return Company(
        company_id=r["id"],
        name=r["nombre"],
        description=r.get("descripcion"),
        logo_url=r.get("logo_url"),
        is_active=bool(r.get("activa", True)),
    )


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, nombre, descripcion, logo_url, activa FROM empresas WHERE activa=1 ORDER BY nombre"
            )
            return [_row_to_company(r) for r in fetchall(cur)]

    def get_by_id(self, company_id: str) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, nombre, descripcion, logo_url, activa FROM empresas WHERE id=%s",
                (company_id,),
            )
            r = fetchone(cur)
            return _row_to_company(r) if r else None

    def create(self, company: Company) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO empresas(id, nombre, descripcion, logo_url, activa)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (company.company_id, company.name, company.description, company.logo_url, int(company.is_active)),
                )
        except Exception as e:
            if is_duplicate_key(e):
                return False
            raise
        return True

    def get_stats(self, company_id: str, *, today: date, week_id: str) -> CompanyStats:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    (SELECT COUNT(*) FROM comedores WHERE empresa_id=%s) AS total_comedores,
                    (SELECT COUNT(*)
                       FROM empleados e
                       JOIN comedores c ON c.id = e.comedor_id
                      WHERE c.empresa_id=%s) AS total_empleados,
                    (SELECT COALESCE(SUM(cl.consumption_count), 0)
                       FROM consumption_logs cl
                       JOIN comedores c ON c.id = cl.comedor_id
                      WHERE c.empresa_id=%s AND cl.consumption_date=%s) AS total_consumos_hoy,
                    (SELECT COALESCE(SUM(cl.consumption_count), 0)
                       FROM consumption_logs cl
                       JOIN comedores c ON c.id = cl.comedor_id
                      WHERE c.empresa_id=%s AND cl.week_id=%s) AS total_consumos_semana
                """,
                (company_id, company_id, company_id, today, company_id, week_id),
            )
            r = fetchone(cur) or {}
            return CompanyStats(
                total_cafeterias=int(r.get("total_comedores") or 0),
                total_employees=int(r.get("total_empleados") or 0),
                consumptions_today=int(r.get("total_consumos_hoy") or 0),
                consumptions_week=int(r.get("total_consumos_semana") or 0),
            )
