"""File-based session repository using JSON files.

Each session is stored as one JSON file in the sessions directory. File
names are a readable slug of the session key plus a short hash of the exact
key, so keys that slugify alike never share a file.
"""

import hashlib
import json
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from .repository import SessionRepository, StorageUnavailable


def slugify(text: str) -> str:
    """Convert a session key to a safe file name stem.

    Examples:
        >>> slugify("t3_abc:Some_User")
        't3_abc--some_user'
    """
    text = text.lower()
    # Key separator becomes a double hyphen so it survives the cleanup below
    text = text.replace(":", "--")
    text = re.sub(r"[^a-z0-9_-]", "-", text)
    return text.strip("-") or "session"


class FileSessionRepository(SessionRepository):
    """JSON file-based session repository.

    The original key is stored inside each file, so listing does not
    depend on reversing the slug.
    """

    def __init__(self, sessions_path: str | Path = "sessions"):
        """Initialize repository.

        Args:
            sessions_path: Path to sessions directory
        """
        self.sessions_path = Path(sessions_path)
        self.sessions_path.mkdir(parents=True, exist_ok=True)

    def _get_session_path(self, key: str) -> Path:
        """Get path to session file."""
        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()[:10]
        return self.sessions_path / f"{slugify(key)}-{digest}.json"

    def _read(self, path: Path) -> dict:
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageUnavailable(f"Cannot read session file {path}: {e}") from e

    def load_session(self, key: str) -> Optional[dict]:
        """Load session state by key."""
        path = self._get_session_path(key)
        if not path.exists():
            return None
        data = self._read(path)
        return data.get("state")

    def save_session(self, key: str, state: dict) -> None:
        """Persist complete session state."""
        path = self._get_session_path(key)
        record = {
            "key": key,
            "state": state,
            "updated_at": datetime.utcnow().isoformat(),
        }
        tmp_path = path.with_suffix(".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(record, f, indent=2)
            tmp_path.replace(path)
        except OSError as e:
            raise StorageUnavailable(f"Cannot write session file {path}: {e}") from e

    def delete_session(self, key: str) -> bool:
        """Delete a session."""
        path = self._get_session_path(key)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as e:
            raise StorageUnavailable(f"Cannot delete session file {path}: {e}") from e
        return True

    def list_sessions(self, post_id: Optional[str] = None) -> list[str]:
        """List session keys, optionally only those on one post."""
        keys = []
        for path in self.sessions_path.glob("*.json"):
            key = self._read(path).get("key", path.stem)
            if post_id is not None and not key.startswith(f"{post_id}:"):
                continue
            keys.append(key)
        return sorted(keys)
