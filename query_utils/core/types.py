"""Shared core type aliases used across contracts, collectors, and ports."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

PositionalParams = List[Any]
ParameterList = Optional[Sequence[Any]]

RowMapping = Mapping[str, Any]
Rows = List[RowMapping]
MaybeRow = Optional[RowMapping]

ColumnList = List[Any]
ColumnKeyedMap = Dict[str, Any]
