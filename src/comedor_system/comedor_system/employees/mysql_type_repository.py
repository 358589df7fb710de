from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, is_duplicate_key
from .type_model import EmployeeType
from .type_repository import EmployeeTypeRepository


class MySQLEmployeeTypeRepository(EmployeeTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[EmployeeType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id_tipo, descripcion, activo FROM tipos_empleado WHERE activo=1 ORDER BY id_tipo")
            return [
                EmployeeType(type_id=int(r["id_tipo"]), description=r["descripcion"], is_active=bool(r["activo"]))
                for r in fetchall(cur)
            ]

    def create(self, description: str) -> Optional[int]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("INSERT INTO tipos_empleado(descripcion) VALUES(%s)", (description,))
                return int(cur.lastrowid)
        except Exception as e:
            if is_duplicate_key(e):
                return None
            raise
