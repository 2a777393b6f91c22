"""SQLite-backed key-value storage."""

import sqlite3
import threading
import time
from pathlib import Path
from typing import List, Optional, Union

from bookish.core import StorageError
from bookish.io.key_value_storage import KeyValueStorage


class SqliteKeyValueStorage(KeyValueStorage):
    """Owns a SQLite connection holding one ``kv_store`` row per key.

    Background persist workers write from pool threads, so the connection
    is shared across threads behind a lock.
    """

    def __init__(self, db_path: Union[Path, str]) -> None:
        self.db_path = db_path if db_path == ":memory:" else Path(db_path)
        self._lock = threading.Lock()
        try:
            self.connection = sqlite3.connect(str(self.db_path), check_same_thread=False)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to open database {self.db_path}: {e}") from e
        self.connection.row_factory = sqlite3.Row
        self.ensure_schema()

    def ensure_schema(self) -> None:
        """Create the table if it does not exist."""
        with self._lock:
            try:
                self.connection.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value BLOB NOT NULL,
                        updated_at INTEGER NOT NULL
                    );
                    """
                )
                self.connection.commit()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to create schema: {e}") from e

    def load(self, key: str) -> Optional[bytes]:
        with self._lock:
            try:
                cur = self.connection.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
                row = cur.fetchone()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to read key {key!r}: {e}") from e
        return bytes(row["value"]) if row else None

    def save(self, key: str, data: bytes) -> None:
        with self._lock:
            try:
                self.connection.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, sqlite3.Binary(data), int(time.time())),
                )
                self.connection.commit()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to write key {key!r}: {e}") from e

    def delete(self, key: str) -> None:
        with self._lock:
            try:
                self.connection.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                self.connection.commit()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to delete key {key!r}: {e}") from e

    def keys(self) -> List[str]:
        with self._lock:
            try:
                rows = self.connection.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to list keys: {e}") from e
        return [row["key"] for row in rows]

    def close(self) -> None:
        with self._lock:
            self.connection.close()
