"""Materialize row streams into plain Python collections.

Every collector consumes its input once, front to back. Execution errors are
raised by the executor before any collector runs, so none of these raise.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .types import ColumnKeyedMap, ColumnList, RowMapping, Rows


def collect_column(rows: Iterable[RowMapping], column: str) -> ColumnList:
    """Return `column` from every row, with `None` for rows lacking it."""

    return [row.get(column) for row in rows]


def collect_single_scalar(rows: Iterable[RowMapping], column: str) -> Optional[Any]:
    """Return the first row's `column` value, or `None` when it is empty.

    An empty result, a `NULL`, an empty string, zero, `False` and the
    string `"0"` all give `None`.
    """

    values = collect_column(rows, column)
    if values and values[0] and values[0] != "0":
        return values[0]
    return None


def collect_records(rows: Iterable[RowMapping]) -> Rows:
    return list(rows)


def collect_column_keyed(rows: Iterable[RowMapping], column: str) -> ColumnKeyedMap:
    """Return `{column: <value from the last row>}`.

    Every row writes under the same `column` key, so later rows replace
    earlier ones and the result holds at most one entry. Existing callers
    depend on this last-write-wins shape; it is not a per-row mapping.
    """

    result: ColumnKeyedMap = {}
    for row in rows:
        result[column] = row.get(column)
    return result
