"""SQLite store backend."""

from __future__ import annotations

import asyncio
import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .store import StoreBackend

log = logging.getLogger(__name__)

_CREATE_TABLE = """CREATE TABLE IF NOT EXISTS potency(
    key TEXT PRIMARY KEY NOT NULL,
    value TEXT NOT NULL
)"""


class SqliteStoreError(Exception):
    """The database reported an error."""

    def __init__(self, source: Exception) -> None:
        super().__init__(f"Sqlite error: {source}")
        self.source = source


@contextmanager
def _sqlite_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        raise SqliteStoreError(exc) from exc


class SqliteStore(StoreBackend):
    """Keeps serialized results in the ``potency`` table of a SQLite database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._lock = asyncio.Lock()

    @classmethod
    async def open(cls, path: str | os.PathLike[str]) -> SqliteStore:
        """Open or create the database at ``path`` and prepare its table."""
        with _sqlite_errors():
            connection = sqlite3.connect(
                os.fspath(path), isolation_level=None, check_same_thread=False
            )
        store = cls(connection)
        await store._migrate()
        return store

    async def _migrate(self) -> None:
        log.debug("creating potency sqlite key value table, if needed")
        async with self._lock:
            with _sqlite_errors():
                self._connection.execute(_CREATE_TABLE)

    def close(self) -> None:
        """Close the database connection."""
        with _sqlite_errors():
            self._connection.close()

    async def __aenter__(self) -> SqliteStore:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    def lock(self) -> asyncio.Lock:
        """Return the lock that gives exclusive use of the connection."""
        return self._lock

    async def fetch_serialized(self, key: str) -> str | None:
        """Return the JSON text stored under ``key``, or None if absent."""
        log.debug("fetching %s", key)
        with _sqlite_errors():
            row = self._connection.execute(
                "SELECT value FROM potency WHERE key = :key", {"key": key}
            ).fetchone()
        return None if row is None else row[0]

    async def store_serialized(self, key: str, value: str) -> None:
        """Insert ``value`` under ``key``; an existing key is an error."""
        log.debug("storing key %s: %s", key, value)
        with _sqlite_errors():
            self._connection.execute(
                "INSERT INTO potency (key, value) VALUES (:key, :value)",
                {"key": key, "value": value},
            )

    async def delete_key(self, key: str) -> None:
        """Remove ``key`` if it is present."""
        with _sqlite_errors():
            cursor = self._connection.execute(
                "DELETE FROM potency WHERE key = :key", {"key": key}
            )
        log.debug("delete %s: %d row(s)", key, cursor.rowcount)