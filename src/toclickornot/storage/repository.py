"""Abstract repository interface for session storage.

Memory, JSON-file and SQLite backends implement this interface, so the
webapp can hold sessions without knowing which backend is active. Session
keys are opaque strings (see SessionKey).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class StorageUnavailable(Exception):
    """The session store could not be read or written."""


@dataclass(frozen=True)
class SessionKey:
    """Identifies one player's session on one post.

    Attributes:
        post_id: Post (game instance) the session belongs to
        username: Player identity, resolved by the caller
    """

    post_id: str
    username: str = "anonymous"

    def __str__(self) -> str:
        return f"{self.post_id}:{self.username}"


class SessionRepository(ABC):
    """Abstract base class for session storage."""

    @abstractmethod
    def load_session(self, key: str) -> Optional[dict]:
        """Load session state by key.

        Args:
            key: Session key

        Returns:
            Session state dict, or None if not found

        Raises:
            StorageUnavailable: If the backend cannot be read
        """
        pass

    @abstractmethod
    def save_session(self, key: str, state: dict) -> None:
        """Persist complete session state.

        Args:
            key: Session key
            state: Complete session state dict

        Raises:
            StorageUnavailable: If the backend cannot be written
        """
        pass

    @abstractmethod
    def delete_session(self, key: str) -> bool:
        """Delete a session.

        Args:
            key: Session key

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    def list_sessions(self, post_id: Optional[str] = None) -> list[str]:
        """List session keys, optionally only those on one post.

        Args:
            post_id: Optional post ID to filter by

        Returns:
            Sorted list of session keys
        """
        pass
