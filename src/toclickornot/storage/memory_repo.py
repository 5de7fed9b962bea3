"""In-process session repository.

Sessions live in a dict for the lifetime of the process. Stored values are
deep-copied on the way in and out so callers cannot mutate stored state
without calling save_session.
"""

import copy
from typing import Optional

from .repository import SessionRepository


class MemorySessionRepository(SessionRepository):
    """Dict-backed session repository."""

    def __init__(self) -> None:
        self._sessions: dict[str, dict] = {}

    def load_session(self, key: str) -> Optional[dict]:
        """Load session state by key."""
        state = self._sessions.get(key)
        return copy.deepcopy(state) if state is not None else None

    def save_session(self, key: str, state: dict) -> None:
        """Persist complete session state."""
        self._sessions[key] = copy.deepcopy(state)

    def delete_session(self, key: str) -> bool:
        """Delete a session."""
        return self._sessions.pop(key, None) is not None

    def list_sessions(self, post_id: Optional[str] = None) -> list[str]:
        """List session keys, optionally only those on one post."""
        prefix = f"{post_id}:" if post_id is not None else ""
        return sorted(key for key in self._sessions if key.startswith(prefix))
