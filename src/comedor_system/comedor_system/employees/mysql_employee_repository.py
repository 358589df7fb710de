from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "e.internal_id, e.comedor_id, e.name, e.number, e.type, e.pin, e.last_active_date"


def _row_to_employee(r: dict) -> Employee:
    last_active = r.get("last_active_date")
    if last_active is not None and hasattr(last_active, "date"):
        last_active = last_active.date()
    return Employee(
        employee_id=r["internal_id"],
        cafeteria_id=r["comedor_id"],
        name=r["name"],
        number=r.get("number"),
        type=r.get("type"),
        pin=r.get("pin"),
        last_active_date=last_active,
        cafeteria_name=r.get("comedor_nombre"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM empleados e WHERE e.internal_id=%s", (employee_id,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def list(self, *, cafeteria_id: Optional[str] = None, search: Optional[str] = None) -> Sequence[Employee]:
        clauses = ["1=1"]
        params: list[object] = []

        if cafeteria_id:
            clauses.append("e.comedor_id=%s")
            params.append(cafeteria_id)
        if search:
            # utf8mb4_unicode_ci collation makes LIKE case insensitive.
            clauses.append("(e.name LIKE %s OR e.number LIKE %s)")
            pattern = f"%{search}%"
            params.extend([pattern, pattern])

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM empleados e WHERE {where} ORDER BY e.name", tuple(params))
            return [_row_to_employee(r) for r in fetchall(cur)]

    def list_with_activity(self, *, cafeteria_id: Optional[str] = None) -> Sequence[Employee]:
        sql = f"""
            SELECT {_COLUMNS}, c.name AS comedor_nombre
            FROM empleados e
            JOIN comedores c ON c.id = e.comedor_id
            WHERE e.last_active_date IS NOT NULL
        """
        params: tuple = ()
        if cafeteria_id:
            sql += " AND e.comedor_id=%s"
            params = (cafeteria_id,)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_row_to_employee(r) for r in fetchall(cur)]

    def create(self, employee: Employee) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO empleados(internal_id, comedor_id, name, number, type, pin)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee.employee_id,
                        employee.cafeteria_id,
                        employee.name,
                        employee.number,
                        employee.type,
                        employee.pin,
                    ),
                )
        except Exception as e:
            if is_duplicate_key(e):
                return False
            raise
        return True

    def update(
        self,
        employee_id: str,
        *,
        name: str,
        number: Optional[str],
        type: Optional[str],
        pin: Optional[str],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE empleados SET name=%s, number=%s, type=%s, pin=%s WHERE internal_id=%s",
                (name, number, type, pin, employee_id),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM empleados WHERE internal_id=%s", (employee_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM empleados WHERE internal_id=%s", (employee_id,))
            return cur.rowcount > 0
