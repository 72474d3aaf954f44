"""Schema and demo-data loading for the MySQL store."""
from __future__ import annotations

import logging
import re
from contextlib import closing
from pathlib import Path
from typing import Iterator

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# Files may carry their own CREATE DATABASE / USE lines; the configured database wins.
_DATABASE_SWITCH = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


def split_sql_script(sql: str) -> Iterator[str]:
    """Yield statements from a schema/seed file.

    Statements end with ``;`` at the end of a line. ``--`` comment lines and
    database switching lines are dropped.
    """
    pending: list[str] = []
    for line in sql.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("--"):
            continue
        pending.append(line)
        if stripped.endswith(";"):
            statement = "\n".join(pending).strip().rstrip(";").strip()
            pending.clear()
            if statement and not _DATABASE_SWITCH.match(statement):
                yield statement
    tail = "\n".join(pending).strip()
    if tail and not _DATABASE_SWITCH.match(tail):
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    with closing(conn_factory.connect(with_database=False)) as conn:
        with closing(conn.cursor()) as cur:
            cur.execute(
                f"CREATE DATABASE IF NOT EXISTS `{conn_factory.database}` "
                "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
            )
        conn.commit()


def apply_sql_file(conn_factory: DatabaseConnection, *, path: str | Path) -> int:
    """Run every statement of ``path`` in one transaction; returns the statement count."""
    statements = list(split_sql_script(Path(path).read_text(encoding="utf-8")))
    with closing(conn_factory.connect()) as conn:
        try:
            with closing(conn.cursor()) as cur:
                for statement in statements:
                    cur.execute(statement)
            conn.commit()
        except Exception:
            conn.rollback()
            raise
    logger.info("Applied %s (%d statements)", Path(path).name, len(statements))
    return len(statements)


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    apply_sql_file(conn_factory, path=schema_path)


def apply_seed_sql(conn_factory: DatabaseConnection, *, seed_path: str | Path) -> None:
    apply_sql_file(conn_factory, path=seed_path)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with closing(conn_factory.connect()) as conn, closing(conn.cursor()) as cur:
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
