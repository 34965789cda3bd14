"""Fetch helper examples for query_utils QueryUtils."""

from __future__ import annotations

import logging
import sqlite3
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "query_utils").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from query_utils import Database, QueryExecutionError, QueryUtils, SQLiteDialect


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # 1) Build the executor once and inject it.
    db = Database(sqlite3.connect(":memory:"), SQLiteDialect())
    qu = QueryUtils(db)

    try:
        db.execute('CREATE TABLE "patient" ("id" INTEGER PRIMARY KEY, "name" TEXT);')

        # 2) Inserts return the generated id.
        for name in ("alice", "bob", "carol"):
            new_id = qu.insert('INSERT INTO "patient" ("name") VALUES (?);', [name])
            print("Inserted", name, "as", new_id)

        # 3) One column from every row.
        print("Ids:", qu.fetch_table_column('SELECT "id" FROM "patient";', "id"))

        # 4) First value only (None when empty/falsy).
        print(
            "Name of id 2:",
            qu.fetch_single_value('SELECT "name" FROM "patient" WHERE "id" = ?;', "name", [2]),
        )

        # 5) Full records.
        print("Records:", qu.fetch_records('SELECT * FROM "patient" ORDER BY "name";'))

        # 6) Single-key map: the last row wins.
        print("Assoc:", qu.fetch_table_column_assoc('SELECT "name" FROM "patient";', "name"))

        # 7) Manual iteration.
        for row in qu.execute_statement('SELECT "id", "name" FROM "patient";'):
            print("Row:", dict(row))

        # 8) Driver failures surface as QueryExecutionError.
        try:
            qu.fetch_records('SELECT * FROM "missing";')
        except QueryExecutionError as exc:
            print("Failed statement:", exc.statement)
    finally:
        db.close()


if __name__ == "__main__":
    main()
