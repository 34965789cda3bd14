"""Error types raised by the query helpers."""

from __future__ import annotations


class QueryExecutionError(RuntimeError):
    """Raised when the database driver fails to execute a statement.

    Attributes:
        statement: SQL text that was sent to the driver.
        detail: Driver error message (or a summary built around it).
    """

    def __init__(self, statement: str, detail: str):
        self.statement = statement
        self.detail = detail
        super().__init__(f"{detail} (statement: {statement})")
