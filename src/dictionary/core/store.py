"""
Embedded key-value store on SQLite.

One ordered table of byte keys to byte values. The connection runs in
exclusive locking mode and takes the lock when the store is opened, so a
directory can only be open in one store at a time.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from dictionary.core.errors import (
    NotFoundError,
    StorageOpenError,
    StorageReadError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)

DB_FILENAME = "dictionary.sqlite3"
DEFAULT_PREFETCH_SIZE = 10

_SCHEMA = """
CREATE TABLE IF NOT EXISTS entries (
    key BLOB PRIMARY KEY,
    value BLOB NOT NULL
) WITHOUT ROWID
"""


class Transaction:
    """A single read-only or read-write transaction on the store."""

    def __init__(self, conn: sqlite3.Connection, writable: bool):
        self._conn = conn
        self.writable = writable

    def get(self, key: bytes) -> bytes:
        row = self._conn.execute(
            "SELECT value FROM entries WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            raise NotFoundError(key.decode("utf-8", errors="replace"))
        return bytes(row[0])

    def set(self, key: bytes, value: bytes) -> None:
        self._require_writable()
        self._conn.execute(
            "INSERT OR REPLACE INTO entries (key, value) VALUES (?, ?)", (key, value)
        )

    def delete(self, key: bytes) -> None:
        self._require_writable()
        self._conn.execute("DELETE FROM entries WHERE key = ?", (key,))

    def iterate(self, prefetch_size: int = DEFAULT_PREFETCH_SIZE) -> Iterator[tuple[bytes, bytes]]:
        """Yield (key, value) pairs in ascending key order."""
        cursor = self._conn.execute("SELECT key, value FROM entries ORDER BY key")
        try:
            while True:
                rows = cursor.fetchmany(prefetch_size)
                if not rows:
                    break
                for key, value in rows:
                    yield bytes(key), bytes(value)
        finally:
            cursor.close()

    def _require_writable(self):
        if not self.writable:
            raise StorageWriteError("Cannot write in a read-only transaction")


class KVStore:
    def __init__(self, conn: sqlite3.Connection, path: Path):
        self._conn = conn
        self.path = path

    @classmethod
    def open(cls, directory, lock_timeout: float = 0.0) -> "KVStore":
        """Create or open the store under `directory` and take its lock."""
        path = Path(directory)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageOpenError(f"Cannot create store directory {path}: {e}") from e

        db_path = path / DB_FILENAME
        try:
            conn = sqlite3.connect(str(db_path), timeout=lock_timeout, isolation_level=None)
        except sqlite3.Error as e:
            raise StorageOpenError(f"Cannot open store at {path}: {e}") from e

        try:
            conn.execute("PRAGMA locking_mode = EXCLUSIVE")
            # exclusive mode keeps the lock until the connection closes
            conn.execute("BEGIN EXCLUSIVE")
            conn.execute(_SCHEMA)
            conn.execute("COMMIT")
        except sqlite3.Error as e:
            conn.close()
            raise StorageOpenError(f"Cannot open store at {path}: {e}") from e

        logger.debug("Opened store at %s", db_path)
        return cls(conn, path)

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self):
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.debug("Closed store at %s", self.path)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def view(self):
        """Read-only transaction."""
        return self._transaction("BEGIN", writable=False, error_cls=StorageReadError)

    def update(self):
        """Read-write transaction, committed when the block exits cleanly."""
        return self._transaction("BEGIN IMMEDIATE", writable=True, error_cls=StorageWriteError)

    @contextmanager
    def _transaction(self, begin: str, writable: bool, error_cls):
        conn = self._conn
        if conn is None:
            raise error_cls("Store is closed")

        try:
            conn.execute(begin)
        except sqlite3.Error as e:
            raise error_cls(f"Cannot start transaction: {e}") from e

        try:
            yield Transaction(conn, writable)
        except sqlite3.Error as e:
            self._rollback(conn)
            raise error_cls(str(e)) from e
        except BaseException:
            self._rollback(conn)
            raise

        try:
            conn.execute("COMMIT")
        except sqlite3.Error as e:
            self._rollback(conn)
            raise error_cls(f"Commit failed: {e}") from e

    @staticmethod
    def _rollback(conn: sqlite3.Connection):
        if conn.in_transaction:
            conn.execute("ROLLBACK")
