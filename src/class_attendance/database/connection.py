from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling

from ..core.constants import DEFAULT_DB_PORT, DEFAULT_POOL_NAME, DEFAULT_POOL_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", DEFAULT_DB_PORT)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "class_attendance")),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabasePool:
    """Owned connection pool handle.

    Built once by the container at application start and closed at process
    exit. Connections returned by :meth:`connect` go back to the pool on
    ``close()``.
    """

    def __init__(self, config: DBConfig, *, pool_size: int = DEFAULT_POOL_SIZE, pool_name: str = DEFAULT_POOL_NAME):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = pooling.MySQLConnectionPool(
            pool_name=pool_name,
            pool_size=int(pool_size),
            pool_reset_session=True,
            host=config.host,
            port=int(config.port),
            user=config.user,
            password=config.password,
            database=config.database,
            autocommit=False,
        )
        logger.info("Opened connection pool %s (size=%s) to %s", pool_name, pool_size, config.describe())

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        if self._pool is None:
            raise RuntimeError("Connection pool is closed")
        return self._pool.get_connection()

    def close(self) -> None:
        if self._pool is None:
            return
        # Dropping the pool lets its idle connections be collected; borrowed
        # ones still go back through their own close().
        self._pool = None
        logger.info("Closed connection pool to %s", self._config.describe())
