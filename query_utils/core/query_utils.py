"""Query helper facade over an injected statement executor."""

from __future__ import annotations

from typing import Any, Optional, Union

from .clauses import BundleInput, ClauseBundle, compile_select
from .collectors import (
    collect_column,
    collect_column_keyed,
    collect_records,
    collect_single_scalar,
)
from .contracts import RowStreamPort, StatementExecutorPort
from .types import ColumnKeyedMap, ColumnList, MaybeRow, ParameterList, Rows


class QueryUtils:
    """Commonly used fetch/insert/select helpers.

    The executor is created once at startup (usually a `Database`) and passed
    in here; nothing is looked up globally.

    Example:
        >>> qu = QueryUtils(Database(sqlite3.connect("app.db"), SQLiteDialect()))
        >>> qu.fetch_table_column("SELECT id FROM patient", "id")
        [1, 2, 3]
    """

    def __init__(self, executor: StatementExecutorPort):
        self.executor = executor

    def execute_statement(self, sql: str, binds: ParameterList = None) -> RowStreamPort:
        """Execute `sql` and return its rows for manual iteration.

        Raises:
            QueryExecutionError: The driver rejected the statement.
        """

        return self.executor.stream(sql, binds)

    def fetch_table_column(
        self, sql: str, column: str, binds: ParameterList = None
    ) -> ColumnList:
        """Return every row's value for `column`, `None` where it is missing."""

        return collect_column(self.execute_statement(sql, binds), column)

    def fetch_single_value(
        self, sql: str, column: str, binds: ParameterList = None
    ) -> Optional[Any]:
        """Return the first row's `column` value, or `None` when it is falsy."""

        return collect_single_scalar(self.execute_statement(sql, binds), column)

    def fetch_records(self, sql: str, binds: ParameterList = None) -> Rows:
        return collect_records(self.execute_statement(sql, binds))

    def fetch_table_column_assoc(
        self, sql: str, column: str, binds: ParameterList = None
    ) -> ColumnKeyedMap:
        """Return `{column: value}` taken from the last row.

        See `collect_column_keyed` for why the result has at most one key.
        """

        return collect_column_keyed(self.execute_statement(sql, binds), column)

    def insert(self, sql: str, binds: ParameterList = None) -> int:
        """Run an `INSERT` and return the generated id.

        Use `execute_statement` instead when the id is not needed.
        """

        return self.executor.insert(sql, binds)

    def select_helper(
        self, base_sql: str, bundle: BundleInput = None
    ) -> Union[Rows, MaybeRow]:
        """Shared getter for `SELECT` statements.

        Args:
            base_sql: Statement up to and including the `FROM` part.
            bundle: `ClauseBundle` or dict with `join`, `where`, `order`,
                `limit` and `data` keys.

        Returns:
            One row (or `None` when nothing matched) if `limit` is exactly
            `1`, otherwise a list of rows.
        """

        clauses = ClauseBundle.coerce(bundle)
        if clauses.expects_single:
            return self.select_one(base_sql, clauses)
        return self.select_many(base_sql, clauses)

    def select_one(self, base_sql: str, bundle: BundleInput = None) -> MaybeRow:
        """Run the composed query with `LIMIT 1` and return its row or `None`."""

        compiled = compile_select(base_sql, ClauseBundle.coerce(bundle).with_limit(1))
        rows = collect_records(self.execute_statement(compiled.sql, compiled.params))
        return rows[0] if rows else None

    def select_many(self, base_sql: str, bundle: BundleInput = None) -> Rows:
        """Run the composed query and return all rows, whatever the limit."""

        compiled = compile_select(base_sql, bundle)
        return collect_records(self.execute_statement(compiled.sql, compiled.params))
