"""Query helpers: parameterized execution, result collection, and SELECT assembly."""

from .config import DatabaseSettings
from .core import (
    ClauseBundle,
    CompiledSelect,
    QueryExecutionError,
    QueryUtils,
    collect_column,
    collect_column_keyed,
    collect_records,
    collect_single_scalar,
    compile_select,
)
from .ports import (
    Database,
    Dialect,
    LastInsertIdTracker,
    MySQLDialect,
    PostgresDialect,
    RowStream,
    SQLiteDialect,
)

__all__ = [
    "QueryUtils",
    "QueryExecutionError",
    "ClauseBundle",
    "CompiledSelect",
    "compile_select",
    "collect_column",
    "collect_column_keyed",
    "collect_records",
    "collect_single_scalar",
    "Database",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "RowStream",
    "LastInsertIdTracker",
    "DatabaseSettings",
]
