"""Statement hooks and application-tracked insert ids."""

from __future__ import annotations

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

from query_utils import Database, QueryUtils, SQLiteDialect


def audit(sql, params, cursor, db):  # noqa: ANN001,ANN201
    # Keep the caller's id before the audit row moves the driver's lastrowid.
    if sql.lstrip().upper().startswith("INSERT"):
        db.last_insert_ids.record(cursor.lastrowid)
    db.execute('INSERT INTO "audit_log" ("stmt", "params") VALUES (?, ?);', [sql, repr(params)])


def main() -> None:
    conn = sqlite3.connect(":memory:")
    conn.execute('CREATE TABLE "audit_log" ("id" INTEGER PRIMARY KEY, "stmt" TEXT, "params" TEXT);')
    conn.execute('CREATE TABLE "patient" ("id" INTEGER PRIMARY KEY, "name" TEXT);')

    with Database(conn, SQLiteDialect(), statement_hooks=[audit]) as db:
        qu = QueryUtils(db)
        print("Patient id:", qu.insert('INSERT INTO "patient" ("name") VALUES (?);', ["alice"]))
        print("Audit rows:", qu.fetch_records('SELECT "stmt", "params" FROM "audit_log";'))


if __name__ == "__main__":
    main()
