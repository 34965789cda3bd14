"""DB-API adapter implementation for the statement executor port."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterable, Optional

from ...core.contracts import DialectPort
from ...core.errors import QueryExecutionError
from ...core.types import ParameterList, PositionalParams, RowMapping
from .last_insert_id import LastInsertIdTracker, resolve_last_insert_id
from .row_stream import RowStream

logger = logging.getLogger(__name__)

StatementHook = Callable[[str, PositionalParams, Any, "Database"], None]


def _close_cursor(cursor: Any) -> None:
    close = getattr(cursor, "close", None)
    if callable(close):
        close()


class Database:
    """Thin DB-API wrapper that normalizes execute and row mapping behavior."""

    def __init__(
        self,
        conn: Any,
        dialect: DialectPort,
        *,
        statement_hooks: Iterable[StatementHook] = (),
        last_insert_ids: Optional[LastInsertIdTracker] = None,
    ):
        """Create database adapter.

        Args:
            conn: DB-API connection object.
            dialect: Concrete SQL dialect instance.
            statement_hooks: Callables run after every successful execution
                with `(sql, params, cursor, database)`, e.g. audit writers.
            last_insert_ids: Tracker that hooks may use to report the id of
                the caller's inserted row. A fresh one is created if omitted.
        """

        self._closed = False
        self._in_hook = False
        self.conn: Any | None = conn
        self.dialect = dialect
        self.statement_hooks = list(statement_hooks)
        self.last_insert_ids = last_insert_ids or LastInsertIdTracker()

    def _require_open_connection(self) -> Any:
        if self._closed or self.conn is None:
            raise RuntimeError("connection is closed")
        return self.conn

    def _normalize_params(self, params: ParameterList) -> PositionalParams:
        if params is None:
            return []
        if isinstance(params, (str, bytes)) or not isinstance(params, Sequence):
            raise TypeError(
                f"Bind parameters must be a list or tuple, got {type(params).__name__}."
            )
        values = list(params)
        for value in values:
            if isinstance(value, (Mapping, list, tuple, set)):
                raise TypeError(
                    f"Bind parameter values must be scalars, got {type(value).__name__}."
                )
        return values

    def _run(self, sql: str, params: ParameterList, failure: str) -> Any:
        if not isinstance(sql, str) or not sql.strip():
            raise ValueError("statement must be a non-empty string.")
        values = self._normalize_params(params)
        conn = self._require_open_connection()
        try:
            cur = conn.cursor()
            # Empty bind lists are never passed to the driver.
            if values:
                cur.execute(sql, values)
            else:
                cur.execute(sql)
        except Exception as exc:
            logger.exception("Query execution failed: %s", exc)
            raise QueryExecutionError(sql, f"{failure} SQL error {exc}") from exc
        logger.debug("Executed query: %s", sql[:80])
        try:
            self._run_hooks(sql, values, cur)
        except Exception:
            _close_cursor(cur)
            raise
        return cur

    def _run_hooks(self, sql: str, values: PositionalParams, cur: Any) -> None:
        # Statements issued by a hook do not trigger hooks again.
        if not self.statement_hooks or self._in_hook:
            return
        self._in_hook = True
        try:
            for hook in self.statement_hooks:
                hook(sql, values, cur, self)
        finally:
            self._in_hook = False

    def execute(self, sql: str, params: ParameterList = None) -> Any:
        """Execute SQL with optional positional parameters and return cursor.

        Raises:
            ValueError: `sql` is empty.
            TypeError: `params` is not a flat sequence of scalars.
            QueryExecutionError: The driver reported a failure.
        """

        return self._run(sql, params, "Query failed.")

    def _row_to_mapping(self, cursor: Any, row: Any) -> RowMapping:
        """Normalize row object to mapping.

        Supports mapping rows directly and tuple/list rows via
        `cursor.description`.
        """

        if isinstance(row, Mapping):
            return row

        if isinstance(row, (tuple, list)):
            desc = getattr(cursor, "description", None)
            if not desc:
                raise TypeError(
                    "Cursor has no description; cannot map tuple rows to dict."
                )
            cols = [d[0] for d in desc]
            return dict(zip(cols, row))

        try:
            m = dict(row)
            if m:
                return m
        except Exception:
            pass

        raise TypeError(f"Unsupported row type: {type(row)}")

    def stream(self, sql: str, params: ParameterList = None) -> RowStream:
        """Execute SQL and return a forward-only stream of row mappings."""

        cur = self.execute(sql, params)
        return RowStream(cur, sql, self._row_to_mapping)

    def insert(self, sql: str, params: ParameterList = None) -> int:
        """Execute an `INSERT` and return the generated id.

        An id recorded on `last_insert_ids` by a statement hook takes
        precedence over the one reported by the driver.
        """

        self.last_insert_ids.clear()
        cur = self._run(sql, params, "Insert failed.")
        try:
            driver_id = self.dialect.get_lastrowid(cur)
        finally:
            _close_cursor(cur)
        new_id = resolve_last_insert_id(self.last_insert_ids.value, driver_id)
        logger.debug("Insert generated id %s", new_id)
        return new_id

    def close(self) -> None:
        """Close underlying connection."""

        if self._closed:
            return
        conn = self.conn
        self._closed = True
        self.conn = None
        close = getattr(conn, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
