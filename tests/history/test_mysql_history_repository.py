from datetime import datetime

import pytest
from mysql.connector import errorcode
from mysql.connector import errors as mysql_errors

from src.comedor_system.comedor_system.history.mysql_history_repository import MySQLHistoryRepository
from tests.stub_mysql import StubConnectionFactory, StubCursor


def test_duplicate_week_returns_none_and_rolls_back():
    dup = mysql_errors.IntegrityError(msg="Duplicate entry 'C-2024-6-3'", errno=errorcode.ER_DUP_ENTRY)
    cur = StubCursor(errors={"INSERT INTO consumption_histories": dup})
    factory = StubConnectionFactory(cur)

    assert MySQLHistoryRepository(factory).create_from_ledger("C", "2024-6-3") is None

    assert factory.last.rolled_back
    assert not factory.last.committed
    assert factory.last.closed
    assert len(cur.statements) == 1


def test_other_integrity_errors_propagate():
    missing = mysql_errors.IntegrityError(msg="FK fails", errno=errorcode.ER_NO_REFERENCED_ROW_2)
    factory = StubConnectionFactory(StubCursor(errors={"INSERT INTO consumption_histories": missing}))

    with pytest.raises(mysql_errors.IntegrityError):
        MySQLHistoryRepository(factory).create_from_ledger("X", "2024-6-3")

    assert factory.last.rolled_back


def test_archive_writes_history_and_details_in_one_transaction():
    stored = {
        "id": 7,
        "comedor_id": "C",
        "week_id": "2024-6-3",
        "total_count": 3,
        "employee_count": 2,
        "archived_at": datetime(2024, 6, 9, 23, 59),
    }
    cur = StubCursor(rows={"FROM consumption_histories WHERE id=%s": stored}, lastrowid=7)
    factory = StubConnectionFactory(cur)

    history = MySQLHistoryRepository(factory).create_from_ledger("C", "2024-6-3")

    assert (history.history_id, history.total_count, history.employee_count) == (7, 3, 2)
    details_sql, details_params = cur.sql_containing("INSERT INTO consumption_history_details")
    assert "GROUP BY cl.employee_id" in details_sql
    assert "LEFT JOIN empleados" in details_sql
    assert details_params == (7, "C", "2024-6-3")
    assert len(factory.connections) == 1
    assert factory.last.committed and not factory.last.rolled_back
