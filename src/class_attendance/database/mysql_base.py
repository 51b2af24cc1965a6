from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import PersistenceError


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True, isolation_level: Optional[str] = None):
    """Borrow a connection and run the block as one transaction.

    Commits when the block exits cleanly, rolls back otherwise. Driver errors
    surface as :class:`PersistenceError` carrying the driver message.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise PersistenceError(str(e)) from e

    try:
        if isolation_level:
            conn.start_transaction(isolation_level=isolation_level)
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _safe_rollback(conn)
        raise PersistenceError(str(e)) from e
    except Exception:
        _safe_rollback(conn)
        raise
    finally:
        conn.close()


def _safe_rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error:
        # Connection is already broken; the original error is what matters.
        pass


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def placeholders(count: int) -> str:
    """``%s`` list for an ``IN (...)`` clause."""
    if count <= 0:
        raise ValueError("placeholders() needs at least one value")
    return ", ".join(["%s"] * count)
