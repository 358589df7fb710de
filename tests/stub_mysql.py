"""Stand-in for a mysql-connector connection, enough to drive ``db_cursor``.

Statements are recorded with collapsed whitespace. Results and errors are
looked up by a substring of the statement text.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple


class StubCursor:
    def __init__(self, *, rows: Optional[dict] = None, errors: Optional[dict] = None, lastrowid: int = 1, rowcount: int = 1):
        self.rows = rows or {}
        self.errors: Dict[str, Exception] = errors or {}
        self.lastrowid = lastrowid
        self.rowcount = rowcount
        self.statements: List[Tuple[str, tuple]] = []
        self.closed = False
        self._result = None

    def execute(self, sql: str, params=None) -> None:
        sql = " ".join(sql.split())
        self.statements.append((sql, params))
        for needle, err in self.errors.items():
            if needle in sql:
                raise err
        self._result = None
        for needle, result in self.rows.items():
            if needle in sql:
                self._result = result
                break

    def fetchone(self):
        if isinstance(self._result, list):
            return self._result[0] if self._result else None
        return self._result

    def fetchall(self):
        if self._result is None:
            return []
        return self._result if isinstance(self._result, list) else [self._result]

    def close(self) -> None:
        self.closed = True

    def sql_containing(self, needle: str) -> Tuple[str, tuple]:
        for sql, params in self.statements:
            if needle in sql:
                return sql, params
        raise AssertionError(f"no statement containing {needle!r}: {self.statements}")


class StubConnection:
    def __init__(self, cursor: StubCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = False) -> StubCursor:
        return self._cursor

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True

    def close(self) -> None:
        self.closed = True


class StubConnectionFactory:
    def __init__(self, cursor: StubCursor):
        self.cursor = cursor
        self.connections: List[StubConnection] = []

    def connect(self) -> StubConnection:
        conn = StubConnection(self.cursor)
        self.connections.append(conn)
        return conn

    @property
    def last(self) -> StubConnection:
        return self.connections[-1]
