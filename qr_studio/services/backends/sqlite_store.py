"""SQLite-backed key-value store."""

import logging
import sqlite3
from pathlib import Path

from qr_studio.exceptions import StorageError

logger = logging.getLogger(__name__)


class SqliteKeyValueStore:
    """Persistent key-value store kept in a single SQLite table.

    Each method opens its own connection, so the store can be shared
    freely and leaves no handle open between operations.
    """

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file
        """
        self._db_path = db_path
        self._initialized = False

    def initialize(self) -> None:
        """Create the database and table if they don't exist.

        Raises:
            StorageError: If the database cannot be created
        """
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            with sqlite3.connect(str(self._db_path)) as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TEXT NOT NULL DEFAULT (datetime('now'))
                    )
                    """)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot initialize store at {self._db_path}: {e}") from e
        self._initialized = True
        logger.info(f"Key-value store initialized at {self._db_path}")

    def get(self, key: str) -> str | None:
        """Read the value stored under a key."""
        self._ensure_initialized()
        try:
            conn = sqlite3.connect(str(self._db_path))
            try:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot read {key!r}: {e}") from e
        return None if row is None else row[0]

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        self._ensure_initialized()
        try:
            conn = sqlite3.connect(str(self._db_path))
            try:
                conn.execute(
                    """
                    INSERT INTO kv (key, value, updated_at)
                    VALUES (?, ?, datetime('now'))
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot write {key!r}: {e}") from e

    def remove(self, key: str) -> None:
        """Delete a key if present."""
        self._ensure_initialized()
        try:
            conn = sqlite3.connect(str(self._db_path))
            try:
                conn.execute("DELETE FROM kv WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot remove {key!r}: {e}") from e

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()
