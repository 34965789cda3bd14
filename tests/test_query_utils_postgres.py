from __future__ import annotations

import os
import unittest

from query_utils import DatabaseSettings, QueryUtils
from query_utils.config import load_driver

POSTGRES_DRIVER, _ = load_driver("postgres")
HAS_POSTGRES_DRIVER = POSTGRES_DRIVER is not None


@unittest.skipUnless(HAS_POSTGRES_DRIVER, "psycopg/psycopg2 is not installed")
class QueryUtilsPostgresTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        settings = DatabaseSettings(
            driver="postgres",
            host=os.getenv("QUERY_UTILS_PG_HOST", os.getenv("PGHOST", "localhost")),
            port=int(os.getenv("QUERY_UTILS_PG_PORT", os.getenv("PGPORT", "5432"))),
            user=os.getenv("QUERY_UTILS_PG_USER", os.getenv("PGUSER", "postgres")),
            password=os.getenv(
                "QUERY_UTILS_PG_PASSWORD",
                os.getenv("PGPASSWORD", os.getenv("POSTGRES_PASSWORD", "password")),
            ),
            database=os.getenv("QUERY_UTILS_PG_DATABASE", os.getenv("PGDATABASE", "postgres")),
        )
        try:
            cls.db = settings.connect()
        except Exception as exc:
            raise unittest.SkipTest(
                f"PostgreSQL is not reachable at {settings.host}:{settings.port}: {exc}"
            ) from exc
        cls.qu = QueryUtils(cls.db)

    @classmethod
    def tearDownClass(cls) -> None:
        db = getattr(cls, "db", None)
        if db is not None:
            db.close()

    def setUp(self) -> None:
        self.db.execute('DROP TABLE IF EXISTS "qu_patient";')
        self.db.execute(
            'CREATE TABLE "qu_patient" ("id" SERIAL PRIMARY KEY, "name" TEXT, "active" INTEGER);'
        )
        self.db.conn.commit()

    def test_insert_returning_and_select_helper(self) -> None:
        ids = [
            self.qu.insert(
                'INSERT INTO "qu_patient" ("name", "active") VALUES (%s, %s) RETURNING "id";',
                [name, 1],
            )
            for name in ("bob", "alice")
        ]
        self.assertEqual(ids, [1, 2])

        row = self.qu.select_helper(
            'SELECT "id", "name" FROM "qu_patient"',
            {"where": 'WHERE "active" = %s', "data": [1], "order": 'ORDER BY "name"', "limit": 1},
        )
        self.assertEqual(row["name"], "alice")

        names = self.qu.fetch_table_column(
            'SELECT "name" FROM "qu_patient" ORDER BY "id";', "name"
        )
        self.assertEqual(names, ["bob", "alice"])

    def test_statement_without_binds_keeps_literal_percent(self) -> None:
        value = self.qu.fetch_single_value("SELECT '100%' AS \"pct\";", "pct")
        self.assertEqual(value, "100%")


if __name__ == "__main__":
    unittest.main()
