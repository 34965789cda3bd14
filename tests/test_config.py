from __future__ import annotations

import unittest

from query_utils import DatabaseSettings, MySQLDialect, PostgresDialect, QueryUtils, SQLiteDialect
from query_utils.config import load_driver


class DatabaseSettingsTests(unittest.TestCase):
    def test_defaults_are_in_memory_sqlite(self) -> None:
        settings = DatabaseSettings.from_env({})
        self.assertEqual(settings.driver, "sqlite")
        self.assertEqual(settings.database, ":memory:")
        self.assertIsInstance(settings.dialect(), SQLiteDialect)

    def test_from_env_reads_prefixed_values(self) -> None:
        settings = DatabaseSettings.from_env(
            {
                "QUERY_UTILS_DRIVER": " Postgres ",
                "QUERY_UTILS_DATABASE": "emr",
                "QUERY_UTILS_HOST": "db.internal",
                "QUERY_UTILS_PORT": "6543",
                "QUERY_UTILS_USER": "app",
                "QUERY_UTILS_PASSWORD": "secret",
            }
        )

        self.assertEqual(settings.driver, "postgres")
        self.assertEqual(settings.port, 6543)
        self.assertIsInstance(settings.dialect(), PostgresDialect)
        self.assertEqual(
            settings.connect_kwargs("psycopg"),
            {
                "host": "db.internal",
                "port": 6543,
                "user": "app",
                "password": "secret",
                "dbname": "emr",
            },
        )

    def test_custom_prefix(self) -> None:
        settings = DatabaseSettings.from_env({"EMR_DRIVER": "mysql"}, prefix="EMR_")
        self.assertIsInstance(settings.dialect(), MySQLDialect)

    def test_mysql_kwargs_follow_driver_module(self) -> None:
        settings = DatabaseSettings(driver="mysql", database="emr")
        self.assertEqual(settings.connect_kwargs("MySQLdb")["db"], "emr")
        self.assertEqual(settings.connect_kwargs("pymysql")["database"], "emr")
        self.assertEqual(settings.connect_kwargs("pymysql")["port"], 3306)
        self.assertNotIn("user", settings.connect_kwargs("pymysql"))

    def test_unknown_driver_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DatabaseSettings(driver="oracle")

    def test_connect_sqlite_builds_usable_database(self) -> None:
        with DatabaseSettings().connect() as db:
            qu = QueryUtils(db)
            db.execute('CREATE TABLE "t" ("id" INTEGER PRIMARY KEY, "name" TEXT);')
            new_id = qu.insert('INSERT INTO "t" ("name") VALUES (?);', ["a"])
            self.assertEqual(new_id, 1)
            self.assertEqual(qu.fetch_single_value('SELECT "name" FROM "t";', "name"), "a")

    def test_load_driver(self) -> None:
        module_name, connect = load_driver("sqlite")
        self.assertEqual(module_name, "sqlite3")
        self.assertTrue(callable(connect))
        self.assertEqual(load_driver("unknown"), (None, None))


if __name__ == "__main__":
    unittest.main()
