"""SQL clause assembly for conditional `SELECT` statements.

Callers supply the statement up to (and including) its `FROM` part plus an
optional bundle of raw clause fragments. Fragments are trusted as-is and are
appended in a fixed order: `JOIN`, `WHERE`, `ORDER BY`, `LIMIT`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Union

from .types import PositionalParams

_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class ClauseBundle:
    """Optional clause fragments for `QueryUtils.select_helper`.

    Attributes:
        join: Raw join fragment, for example `"JOIN visit v ON v.pid = p.id"`.
        where: Raw where fragment including the keyword, for example `"WHERE active = ?"`.
        order: Raw ordering fragment, for example `"ORDER BY name"`.
        limit: Row limit. `1` switches `select_helper` to single-row results.
        data: Positional bind values for placeholders in the fragments.
    """

    join: Optional[str] = None
    where: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    data: PositionalParams = field(default_factory=list)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ClauseBundle:
        """Build a bundle from the loose dict form used by older call sites.

        `data` is kept only when it is a list or tuple. `limit` goes through
        integer coercion, so `"1"` and `1.9` both become `1`.
        """

        data = mapping.get("data")
        limit = mapping.get("limit")
        return cls(
            join=mapping.get("join"),
            where=mapping.get("where"),
            order=mapping.get("order"),
            limit=None if limit is None else coerce_limit(limit),
            data=list(data) if isinstance(data, (list, tuple)) else [],
        )

    @classmethod
    def coerce(cls, bundle: BundleInput) -> ClauseBundle:
        """Normalize a bundle, mapping, or `None` into a `ClauseBundle`."""

        if bundle is None:
            return cls()
        if isinstance(bundle, ClauseBundle):
            return bundle
        if isinstance(bundle, Mapping):
            return cls.from_mapping(bundle)
        raise TypeError(f"Unsupported clause bundle type: {type(bundle)}")

    def with_limit(self, limit: Optional[int]) -> ClauseBundle:
        return replace(self, limit=limit)

    @property
    def expects_single(self) -> bool:
        """Whether the bundle asks for one row instead of a list.

        Only an exact limit of `1` qualifies; `0`, `None` and larger
        limits all produce lists.
        """

        return self.limit == 1


BundleInput = Union[ClauseBundle, Mapping[str, Any], None]


@dataclass(frozen=True)
class CompiledSelect:
    """Final statement text, bind values, and expected result shape."""

    sql: str
    params: PositionalParams
    single: bool


def coerce_limit(value: Any) -> int:
    """Convert a loose limit value to an integer.

    Numbers are truncated, booleans map to `0`/`1`, strings use their leading
    numeric prefix (`"10 rows"` -> `10`, `"1e2"` -> `100`, `"2.5"` -> `2`).
    Anything else becomes `0`, which adds no `LIMIT` clause.
    """

    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value)
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="ignore")
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if not match:
            return 0
        number = match.group(1)
        if number.lstrip("+-").isdigit():
            return int(number)
        return coerce_limit(float(number))
    return 0


def compile_select(base_sql: str, bundle: BundleInput = None) -> CompiledSelect:
    """Append the bundle's fragments to `base_sql`.

    Args:
        base_sql: Statement text up to and including the `FROM` part.
        bundle: Clause fragments, or `None` to run `base_sql` unchanged.

    Returns:
        Composed SQL with bind values and the single-row flag.
    """

    clauses = ClauseBundle.coerce(bundle)
    sql = base_sql
    sql += f" {clauses.join}" if clauses.join else ""
    sql += f" {clauses.where}" if clauses.where else ""
    sql += f" {clauses.order}" if clauses.order else ""
    sql += f" LIMIT {clauses.limit}" if clauses.limit else ""
    return CompiledSelect(sql, list(clauses.data), clauses.expects_single)
