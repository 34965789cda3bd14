"""Core port contracts used by adapters and the query facade."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol

from .types import MaybeRow, ParameterList, RowMapping


class DialectPort(Protocol):
    """Dialect behavior required by the statement executor."""

    name: str

    def get_lastrowid(self, cursor: Any) -> Optional[int]: ...


class RowStreamPort(Protocol):
    """Forward-only sequence of rows produced by one executed statement."""

    def __iter__(self) -> Iterator[RowMapping]: ...

    def fetch_next(self) -> MaybeRow: ...

    def close(self) -> None: ...


class StatementExecutorPort(Protocol):
    """Statement execution behavior required by `QueryUtils`."""

    def stream(self, sql: str, params: ParameterList = None) -> RowStreamPort: ...

    def insert(self, sql: str, params: ParameterList = None) -> int: ...
