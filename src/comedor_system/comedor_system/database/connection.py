from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import mysql.connector
from mysql.connector import errorcode
from mysql.connector import errors as mysql_errors

from ..core.exceptions import StorageUnavailableError

# Login or database refused by a reachable server.
_UNAVAILABLE_ERRNOS = (
    errorcode.ER_ACCESS_DENIED_ERROR,
    errorcode.ER_DBACCESS_DENIED_ERROR,
    errorcode.ER_BAD_DB_ERROR,
)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    connect_timeout: int = 10

    @classmethod
    def from_mapping(cls, values: Mapping) -> "DBConfig":
        """Build from a settings ``DB_CONFIG`` dict; missing keys get local defaults."""
        return cls(
            host=str(values.get("host", "localhost")),
            port=int(values.get("port", 3306)),
            user=str(values.get("user", "root")),
            password=str(values.get("password", "")),
            database=str(values.get("database", "comedor_db")),
            connect_timeout=int(values.get("connect_timeout", 10)),
        )


class DatabaseConnection:
    """Process-wide factory of MySQL connections.

    Each repository call opens its own connection and closes it when done, so
    request threads never share one.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        cfg = self._config
        try:
            return mysql.connector.connect(
                host=cfg.host,
                port=cfg.port,
                user=cfg.user,
                password=cfg.password,
                database=cfg.database,
                connection_timeout=cfg.connect_timeout,
            )
        except (mysql_errors.InterfaceError, mysql_errors.OperationalError) as e:
            raise StorageUnavailableError(f"No se pudo conectar a la base de datos {cfg.host}:{cfg.port}") from e
        except mysql_errors.ProgrammingError as e:
            if e.errno in _UNAVAILABLE_ERRNOS:
                raise StorageUnavailableError(
                    f"No se pudo abrir la base de datos {cfg.database} en {cfg.host}:{cfg.port}"
                ) from e
            raise
