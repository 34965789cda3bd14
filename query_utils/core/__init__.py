"""Public core API for clause assembly, result collection, and query helpers."""

from .clauses import BundleInput, ClauseBundle, CompiledSelect, coerce_limit, compile_select
from .collectors import (
    collect_column,
    collect_column_keyed,
    collect_records,
    collect_single_scalar,
)
from .contracts import DialectPort, RowStreamPort, StatementExecutorPort
from .errors import QueryExecutionError
from .query_utils import QueryUtils

__all__ = [
    "BundleInput",
    "ClauseBundle",
    "CompiledSelect",
    "coerce_limit",
    "compile_select",
    "collect_column",
    "collect_column_keyed",
    "collect_records",
    "collect_single_scalar",
    "DialectPort",
    "RowStreamPort",
    "StatementExecutorPort",
    "QueryExecutionError",
    "QueryUtils",
]
