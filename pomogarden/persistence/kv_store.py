"""Key-value persistence layer holding the serialized garden."""

import sqlite3
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import structlog

from ..errors import PersistenceError
from ..utils.time import utc_now_iso


class KeyValueStore(ABC):
    """Durable mapping of string keys to string values."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key was never written."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under ``key``."""
        pass


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store; contents are lost on exit."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqliteKeyValueStore(KeyValueStore):
    """SQLite-based key-value store."""

    def __init__(self, db_path: str = "pomogarden.db"):
        self.db_path = Path(db_path)
        self.logger = structlog.get_logger("persistence.kv_store")
        self._lock = threading.Lock()

        if self.db_path.parent != Path("."):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS entries (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise
        finally:
            if conn:
                conn.close()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            try:
                with self._get_connection() as conn:
                    row = conn.execute(
                        "SELECT value FROM entries WHERE key = ?", (key,)
                    ).fetchone()
            except sqlite3.Error as e:
                raise PersistenceError(
                    f"Failed to read {key}: {e}", operation="get", target=str(self.db_path)
                ) from e

        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            try:
                with self._get_connection() as conn:
                    conn.execute("""
                        INSERT INTO entries (key, value, updated_at) VALUES (?, ?, ?)
                        ON CONFLICT(key) DO UPDATE SET
                            value = excluded.value,
                            updated_at = excluded.updated_at
                    """, (key, value, utc_now_iso()))
                    conn.commit()
            except sqlite3.Error as e:
                raise PersistenceError(
                    f"Failed to write {key}: {e}", operation="set", target=str(self.db_path)
                ) from e

        self.logger.debug("Entry stored", key=key, size=len(value))

