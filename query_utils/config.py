"""Environment-driven connection settings."""

from __future__ import annotations

import importlib
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .ports.db_api import Database, Dialect, MySQLDialect, PostgresDialect, SQLiteDialect

logger = logging.getLogger(__name__)

ENV_PREFIX = "QUERY_UTILS_"

_DIALECTS: dict[str, type[Dialect]] = {
    "sqlite": SQLiteDialect,
    "postgres": PostgresDialect,
    "mysql": MySQLDialect,
}

_DRIVER_MODULES: dict[str, tuple[str, ...]] = {
    "sqlite": ("sqlite3",),
    "postgres": ("psycopg", "psycopg2"),
    "mysql": ("MySQLdb", "pymysql", "mysql.connector"),
}

_DEFAULT_PORTS = {"postgres": 5432, "mysql": 3306}


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection settings for the process-wide `Database`.

    Build once at startup, call `connect()`, and hand the result to
    `QueryUtils`.
    """

    driver: str = "sqlite"
    database: str = ":memory:"
    host: str = "localhost"
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None

    def __post_init__(self) -> None:
        if self.driver not in _DIALECTS:
            raise ValueError(
                f"driver must be one of: {', '.join(sorted(_DIALECTS))}; got {self.driver!r}."
            )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, prefix: str = ENV_PREFIX
    ) -> DatabaseSettings:
        """Read `<prefix>DRIVER`, `DATABASE`, `HOST`, `PORT`, `USER`, `PASSWORD`."""

        env = os.environ if environ is None else environ
        port = env.get(f"{prefix}PORT")
        return cls(
            driver=env.get(f"{prefix}DRIVER", "sqlite").strip().lower(),
            database=env.get(f"{prefix}DATABASE", ":memory:"),
            host=env.get(f"{prefix}HOST", "localhost"),
            port=int(port) if port else None,
            user=env.get(f"{prefix}USER"),
            password=env.get(f"{prefix}PASSWORD"),
        )

    def dialect(self) -> Dialect:
        return _DIALECTS[self.driver]()

    def connect_kwargs(self, module_name: str) -> dict[str, Any]:
        """Keyword arguments for the given driver module's `connect()`."""

        if self.driver == "sqlite":
            return {"database": self.database}

        kwargs: dict[str, Any] = {
            "host": self.host,
            "port": self.port or _DEFAULT_PORTS[self.driver],
        }
        if self.user is not None:
            kwargs["user"] = self.user
        if self.password is not None:
            kwargs["password"] = self.password
        if self.driver == "postgres":
            kwargs["dbname"] = self.database
        elif module_name == "MySQLdb":
            kwargs["db"] = self.database
        else:
            kwargs["database"] = self.database
        return kwargs

    def connect(self) -> Database:
        """Open a connection with the first installed driver module."""

        module_name, connect = load_driver(self.driver)
        if connect is None:
            raise RuntimeError(
                f"No DB-API driver installed for {self.driver!r}; tried: "
                f"{', '.join(_DRIVER_MODULES[self.driver])}."
            )
        logger.debug("Connecting to %s via %s", self.driver, module_name)
        conn = connect(**self.connect_kwargs(module_name))
        return Database(conn, self.dialect())


def load_driver(driver: str) -> tuple[str, Callable[..., Any]] | tuple[None, None]:
    """Return `(module_name, connect)` for the first importable driver module."""

    for module_name in _DRIVER_MODULES.get(driver, ()):
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            continue
        connect = getattr(module, "connect", None)
        if connect is not None:
            return module_name, connect
    return None, None
