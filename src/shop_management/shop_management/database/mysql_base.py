from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from decimal import Decimal
from typing import Any, Iterator, Optional

from .connection import DatabaseConnection


class MySQLRepository:
    """Shared plumbing for the MySQL repositories.

    Each public repository call runs in its own connection and transaction.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def _transaction(self) -> Iterator[Any]:
        conn = self._conn_factory.connect()
        cur = conn.cursor(dictionary=True, buffered=True)
        try:
            yield cur
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cur.close()
            conn.close()

    def _select(self, sql: str, params: tuple = ()) -> list[dict]:
        with self._transaction() as cur:
            cur.execute(sql, params)
            return list(cur.fetchall() or [])

    def _select_one(self, sql: str, params: tuple = ()) -> Optional[dict]:
        with self._transaction() as cur:
            cur.execute(sql, params)
            return cur.fetchone() or None

    def _execute(self, sql: str, params: tuple = ()) -> int:
        """Run a write statement, return the affected row count."""
        with self._transaction() as cur:
            cur.execute(sql, params)
            return cur.rowcount


def entry_from_mysql(value: Any) -> Optional[str]:
    """TIME column -> ``HH:MM`` clock-in entry.

    The pure-Python connector hands TIME back as ``timedelta``; other drivers
    use ``time`` or ``'HH:MM:SS'`` strings.
    """
    if value is None:
        return None
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds()) % 86400 // 60
        value = time(hour=minutes // 60, minute=minutes % 60)
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, str):
        hours, _, rest = value.strip().partition(":")
        return f"{int(hours):02d}:{int(rest[:2]):02d}"
    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")


def number_from_mysql(value: Optional[Decimal]) -> Optional[float]:
    # DECIMAL columns come back as Decimal
    return float(value) if value is not None else None
