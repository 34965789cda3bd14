"""Public port exports for concrete adapter implementations."""

from .db_api import (
    Database,
    Dialect,
    LastInsertIdTracker,
    MySQLDialect,
    PostgresDialect,
    RowStream,
    SQLiteDialect,
)

__all__ = [
    "Database",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "RowStream",
    "LastInsertIdTracker",
]
