import sqlite3
from datetime import UTC, datetime
from pathlib import Path

SCHEMA = """
CREATE TABLE IF NOT EXISTS snapshots (
    key TEXT PRIMARY KEY,
    blob BLOB NOT NULL,
    updated_at TEXT NOT NULL
);
"""


class SQLiteSnapshotStore:
    """SnapshotStorePort backed by a single SQLite table (one row per key)."""

    def __init__(self, db_path: str | Path):
        # File path only: every call opens its own connection
        self.db_path = str(db_path)
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = self._get_conn()
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()

    def _get_conn(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def load(self, key: str) -> bytes | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT blob FROM snapshots WHERE key = ?", (key,)).fetchone()
            if not row:
                return None
            return bytes(row[0])
        finally:
            conn.close()

    def save(self, key: str, blob: bytes) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO snapshots (key, blob, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    blob=excluded.blob,
                    updated_at=excluded.updated_at
            """,
                (key, blob, datetime.now(UTC).isoformat()),
            )
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM snapshots WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()
