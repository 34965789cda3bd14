"""Concrete SQL dialect implementations for DB-API adapters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional


class Dialect:
    """Base dialect that defines how an insert's generated id is read."""

    name: str = "generic"

    def get_lastrowid(self, cursor: Any) -> Optional[int]:
        """Extract `lastrowid` from DB-API cursor when available."""

        return getattr(cursor, "lastrowid", None)


class SQLiteDialect(Dialect):
    """SQLite dialect (`?` positional parameters)."""

    name = "sqlite"


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`%s` positional parameters).

    PostgreSQL cursors carry no useful `lastrowid`; inserts that need the
    generated id must end with `RETURNING <pk>`.
    """

    name = "postgres"

    def get_lastrowid(self, cursor: Any) -> Optional[int]:
        if not getattr(cursor, "description", None):
            return None
        row = cursor.fetchone()
        if row is None:
            return None
        if isinstance(row, Mapping):
            return next(iter(row.values()), None)
        return row[0]


class MySQLDialect(Dialect):
    """MySQL dialect (`%s` positional parameters)."""

    name = "mysql"
