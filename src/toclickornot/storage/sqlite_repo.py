"""SQLite-based session repository.

Stores each session as a JSON blob keyed by session key, with the post ID
split out into an indexed column for listing.
"""

import json
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from .repository import SessionRepository, StorageUnavailable


def dict_factory(cursor: sqlite3.Cursor, row: tuple) -> dict:
    """Convert sqlite3 row to dict."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


class SQLiteSessionRepository(SessionRepository):
    """SQLite-based session repository."""

    def __init__(self, database_uri: str = "instance/toclickornot.db"):
        """Initialize repository.

        Args:
            database_uri: Path to SQLite database file
        """
        self.database_path = Path(database_uri)
        self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Get database connection."""
        try:
            conn = sqlite3.connect(self.database_path)
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Cannot open {self.database_path}: {e}") from e
        conn.row_factory = dict_factory
        return conn

    def _execute(self, sql: str, params: tuple = ()) -> tuple[list[dict], int]:
        """Run one statement and return (rows, rowcount)."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(sql, params)
            rows = cursor.fetchall()
            conn.commit()
            return rows, cursor.rowcount
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Session query failed: {e}") from e
        finally:
            conn.close()

    def _init_db(self) -> None:
        """Initialize database schema."""
        self._execute("""
            CREATE TABLE IF NOT EXISTS sessions (
                key TEXT PRIMARY KEY,
                post_id TEXT NOT NULL,
                data TEXT NOT NULL,
                updated_at TEXT
            )
        """)
        self._execute("CREATE INDEX IF NOT EXISTS idx_sessions_post_id ON sessions(post_id)")

    def load_session(self, key: str) -> Optional[dict]:
        """Load session state by key."""
        rows, _ = self._execute("SELECT data FROM sessions WHERE key = ?", (key,))
        if not rows:
            return None
        return json.loads(rows[0]["data"])

    def save_session(self, key: str, state: dict) -> None:
        """Persist complete session state."""
        self._execute("""
            INSERT INTO sessions (key, post_id, data, updated_at)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                data = excluded.data,
                updated_at = excluded.updated_at
        """, (
            key,
            key.split(":", 1)[0],
            json.dumps(state),
            datetime.utcnow().isoformat(),
        ))

    def delete_session(self, key: str) -> bool:
        """Delete a session."""
        _, rowcount = self._execute("DELETE FROM sessions WHERE key = ?", (key,))
        return rowcount > 0

    def list_sessions(self, post_id: Optional[str] = None) -> list[str]:
        """List session keys, optionally only those on one post."""
        if post_id is not None:
            rows, _ = self._execute(
                "SELECT key FROM sessions WHERE post_id = ? ORDER BY key", (post_id,)
            )
        else:
            rows, _ = self._execute("SELECT key FROM sessions ORDER BY key")
        return [row["key"] for row in rows]
