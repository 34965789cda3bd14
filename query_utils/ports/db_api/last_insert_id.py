"""Application-tracked last insert id."""

from __future__ import annotations

from typing import Any, Optional


class LastInsertIdTracker:
    """Holds an insert id reported by application code during a statement.

    Audit hooks that write their own rows while an insert runs would make the
    driver's `lastrowid` point at the audit row. Such hooks record the id of
    the caller's row here, and `Database.insert` prefers it.
    """

    def __init__(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def record(self, value: Optional[int]) -> None:
        self._value = int(value or 0)

    def clear(self) -> None:
        self._value = 0


def resolve_last_insert_id(tracked: Optional[int], driver_reported: Any) -> int:
    """Pick the id to report for an insert.

    A positive application-tracked id wins. Otherwise the driver value is
    used, and `0` when the driver has none.
    """

    if tracked is not None and tracked > 0:
        return tracked
    if driver_reported is None:
        return 0
    return int(driver_reported)
