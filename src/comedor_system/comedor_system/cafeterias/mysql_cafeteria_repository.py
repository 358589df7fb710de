from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Cafeteria
from .repository import CafeteriaRepository

_SELECT = """
    SELECT c.id, c.name, c.require_pin, c.empresa_id,
           COALESCE(emp.nombre, 'Sin Empresa') AS empresa_nombre,
           (SELECT COUNT(*) FROM empleados e WHERE e.comedor_id = c.id) AS total_empleados
    FROM comedores c
    LEFT JOIN empresas emp ON emp.id = c.empresa_id
"""


def _row_to_cafeteria(r: dict) -> Cafeteria:
    return Cafeteria(
        cafeteria_id=r["id"],
        name=r["name"],
        company_id=r["empresa_id"],
        require_pin=bool(r["require_pin"]),
        company_name=r.get("empresa_nombre"),
        employee_count=int(r.get("total_empleados") or 0),
    )


class MySQLCafeteriaRepository(CafeteriaRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list(self, *, company_id: Optional[str] = None) -> Sequence[Cafeteria]:
        sql = _SELECT
        params: tuple = ()
        if company_id:
            sql += " WHERE c.empresa_id=%s"
            params = (company_id,)
        sql += " ORDER BY c.name"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_row_to_cafeteria(r) for r in fetchall(cur)]

    def list_ids(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM comedores ORDER BY id")
            return [r["id"] for r in fetchall(cur)]

    def get_by_id(self, cafeteria_id: str) -> Optional[Cafeteria]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE c.id=%s", (cafeteria_id,))
            r = fetchone(cur)
            return _row_to_cafeteria(r) if r else None

    def create(self, cafeteria: Cafeteria) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO comedores(id, name, empresa_id, require_pin) VALUES(%s,%s,%s,%s)",
                    (cafeteria.cafeteria_id, cafeteria.name, cafeteria.company_id, int(cafeteria.require_pin)),
                )
        except Exception as e:
            if is_duplicate_key(e):
                return False
            raise
        return True

    def update(self, cafeteria_id: str, *, name: str, require_pin: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE comedores SET name=%s, require_pin=%s WHERE id=%s",
                (name, int(require_pin), cafeteria_id),
            )
            # rowcount is 0 when values are unchanged, so re-check existence.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM comedores WHERE id=%s", (cafeteria_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, cafeteria_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM comedores WHERE id=%s", (cafeteria_id,))
            return cur.rowcount > 0
