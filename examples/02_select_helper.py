"""Conditional SELECT assembly with select_helper/select_one/select_many."""

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

from query_utils import ClauseBundle, Database, QueryUtils, SQLiteDialect, compile_select


def main() -> None:
    db = Database(sqlite3.connect(":memory:"), SQLiteDialect())
    qu = QueryUtils(db)

    try:
        db.execute('CREATE TABLE "patient" ("id" INTEGER PRIMARY KEY, "name" TEXT, "active" INTEGER);')
        db.execute('CREATE TABLE "visit" ("pid" INTEGER, "reason" TEXT);')
        for name, active in (("alice", 1), ("bob", 0), ("carol", 1)):
            qu.insert('INSERT INTO "patient" ("name", "active") VALUES (?, ?);', [name, active])
        db.execute('INSERT INTO "visit" VALUES (1, \'checkup\');')

        base = 'SELECT p."id", p."name" FROM "patient" p'

        # 1) Preview the composed statement.
        bundle = {"where": 'WHERE p."active" = ?', "data": [1], "order": 'ORDER BY p."name"'}
        print("SQL:", compile_select(base, bundle).sql)

        # 2) List result.
        print("Active:", qu.select_helper(base, bundle))

        # 3) limit=1 returns one row (or None).
        print("First active:", qu.select_helper(base, {**bundle, "limit": 1}))
        print("Nobody:", qu.select_helper(base, {"where": 'WHERE p."id" = ?', "data": [99], "limit": 1}))

        # 4) Typed bundle with a join.
        joined = ClauseBundle(join='JOIN "visit" v ON v."pid" = p."id"', order='ORDER BY p."id"')
        print("With visits:", qu.select_many(base, joined))

        # 5) Explicit shapes.
        print("select_one:", qu.select_one(base, {"order": 'ORDER BY p."id" DESC'}))
        print("select_many limit 1:", qu.select_many(base, {"limit": 1}))
    finally:
        db.close()


if __name__ == "__main__":
    main()
