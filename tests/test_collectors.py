from __future__ import annotations

import unittest

from query_utils import (
    collect_column,
    collect_column_keyed,
    collect_records,
    collect_single_scalar,
)


def _rows() -> list[dict[str, object]]:
    return [
        {"id": 1, "name": "alice"},
        {"name": "bob"},
        {"id": 3, "name": "carol"},
    ]


class CollectorTests(unittest.TestCase):
    def test_collect_column_substitutes_none_for_missing(self) -> None:
        self.assertEqual(collect_column(_rows(), "id"), [1, None, 3])
        self.assertEqual(collect_column([], "id"), [])

    def test_collect_column_consumes_iterators(self) -> None:
        self.assertEqual(collect_column(iter(_rows()), "name"), ["alice", "bob", "carol"])

    def test_collect_records_preserves_order(self) -> None:
        rows = _rows()
        self.assertEqual(collect_records(iter(rows)), rows)

    def test_single_scalar_returns_first_value(self) -> None:
        self.assertEqual(collect_single_scalar(_rows(), "name"), "alice")
        self.assertEqual(collect_single_scalar([{"n": "00"}], "n"), "00")
        self.assertEqual(collect_single_scalar([{"n": "0.0"}], "n"), "0.0")

    def test_single_scalar_falsy_first_values_are_absent(self) -> None:
        self.assertIsNone(collect_single_scalar([], "id"))
        self.assertIsNone(collect_single_scalar([{"id": None}, {"id": 2}], "id"))
        self.assertIsNone(collect_single_scalar([{"id": ""}, {"id": 2}], "id"))
        self.assertIsNone(collect_single_scalar([{"id": 0}], "id"))
        self.assertIsNone(collect_single_scalar([{"n": "0"}, {"n": "5"}], "n"))
        self.assertIsNone(collect_single_scalar([{"other": 1}], "id"))

    def test_column_keyed_is_last_write_wins(self) -> None:
        # One key only: each row overwrites the previous value.
        self.assertEqual(collect_column_keyed(_rows(), "name"), {"name": "carol"})
        self.assertEqual(collect_column_keyed(_rows()[:2], "id"), {"id": None})
        self.assertEqual(collect_column_keyed([], "id"), {})


if __name__ == "__main__":
    unittest.main()
