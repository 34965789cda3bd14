"""DB-API adapter and dialect exports."""

from .database import Database, StatementHook
from .dialects import Dialect, MySQLDialect, PostgresDialect, SQLiteDialect
from .last_insert_id import LastInsertIdTracker, resolve_last_insert_id
from .row_stream import RowStream

__all__ = [
    "Database",
    "Dialect",
    "LastInsertIdTracker",
    "MySQLDialect",
    "PostgresDialect",
    "RowStream",
    "SQLiteDialect",
    "StatementHook",
    "resolve_last_insert_id",
]
