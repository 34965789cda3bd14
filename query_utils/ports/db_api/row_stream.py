"""Forward-only row iteration over an executed DB-API cursor."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from ...core.errors import QueryExecutionError
from ...core.types import MaybeRow, RowMapping

logger = logging.getLogger(__name__)

RowMapper = Callable[[Any, Any], RowMapping]


class RowStream:
    """Single-pass stream of normalized rows from one statement.

    The statement has already run when a stream exists; iterating only
    fetches. Re-running the statement is the only way to read rows again.
    """

    def __init__(self, cursor: Any, statement: str, row_mapper: RowMapper):
        self.cursor = cursor
        self.statement = statement
        self._row_mapper = row_mapper
        # Statements without a result set (DDL, UPDATE, ...) have no description.
        self._exhausted = not getattr(cursor, "description", None)
        if self._exhausted:
            self.close()

    def fetch_next(self) -> MaybeRow:
        """Return the next row, or `None` once the stream is exhausted."""

        if self._exhausted:
            return None
        try:
            row = self.cursor.fetchone()
        except Exception as exc:
            logger.exception("Row fetch failed: %s", exc)
            self.close()
            raise QueryExecutionError(self.statement, f"Fetch failed. SQL error {exc}") from exc
        if row is None:
            self.close()
            return None
        return self._row_mapper(self.cursor, row)

    def close(self) -> None:
        """Stop the stream and release the cursor."""

        self._exhausted = True
        close = getattr(self.cursor, "close", None)
        if callable(close):
            close()

    def __iter__(self) -> Iterator[RowMapping]:
        return self

    def __next__(self) -> RowMapping:
        row = self.fetch_next()
        if row is None:
            raise StopIteration
        return row
