"""SQLite-backed key-value store for locally persisted data."""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from config.exceptions import DatabaseError

logger = logging.getLogger(__name__)

_CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class Database:
    """Key-value storage with the same contract as browser localStorage.

    Values are opaque strings; callers serialize their own data.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode = WAL")
        return conn

    def _init_db(self):
        try:
            with self._get_conn() as conn:
                conn.executescript(_CREATE_TABLES_SQL)
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to initialize storage: {e}", {"path": str(self.db_path)}) from e

    def get_item(self, key: str) -> Optional[str]:
        try:
            with self._get_conn() as conn:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to read key: {e}", {"key": key}) from e
        return row["value"] if row else None

    def set_item(self, key: str, value: str):
        try:
            with self._get_conn() as conn:
                conn.execute(
                    "INSERT INTO kv_store (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
                    "updated_at = CURRENT_TIMESTAMP",
                    (key, value),
                )
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to write key: {e}", {"key": key}) from e
        logger.debug("Stored %d chars under '%s'", len(value), key)

