"""Storage configuration for To Click Or Not.

This module provides configuration for storage backends and a factory
function to create the session repository based on configuration.
"""

import os
from enum import Enum

from .file_repo import FileSessionRepository
from .memory_repo import MemorySessionRepository
from .repository import SessionRepository
from .sqlite_repo import SQLiteSessionRepository


class StorageBackend(Enum):
    """Available storage backends."""

    MEMORY = "memory"
    FILE = "file"
    SQLITE = "sqlite"


# Default configuration (can be overridden via environment variables)
DEFAULT_STORAGE_BACKEND = StorageBackend.MEMORY
DEFAULT_SESSIONS_PATH = "sessions"
DEFAULT_DATABASE_URI = "instance/toclickornot.db"


def parse_storage_backend(value: str | None) -> StorageBackend:
    """Map a backend name to a StorageBackend.

    Names are case-insensitive. Missing or unknown names fall back to the
    default backend.
    """
    try:
        return StorageBackend((value or DEFAULT_STORAGE_BACKEND.value).lower())
    except ValueError:
        return DEFAULT_STORAGE_BACKEND


def get_storage_backend() -> StorageBackend:
    """Get configured storage backend from environment.

    Unknown values fall back to the default backend.

    Returns:
        StorageBackend enum value
    """
    return parse_storage_backend(os.environ.get("TOCLICKORNOT_STORAGE_BACKEND"))


def get_sessions_path() -> str:
    """Get configured sessions path from environment."""
    return os.environ.get("TOCLICKORNOT_SESSIONS_PATH", DEFAULT_SESSIONS_PATH)


def get_database_uri() -> str:
    """Get configured database URI from environment."""
    return os.environ.get("TOCLICKORNOT_DATABASE_URI", DEFAULT_DATABASE_URI)


def get_session_repository(
    backend: StorageBackend | None = None,
) -> SessionRepository:
    """Factory function to create session repository.

    Args:
        backend: Storage backend to use. If None, uses environment config.

    Returns:
        SessionRepository instance
    """
    if backend is None:
        backend = get_storage_backend()

    if backend == StorageBackend.SQLITE:
        return SQLiteSessionRepository(get_database_uri())
    if backend == StorageBackend.FILE:
        return FileSessionRepository(get_sessions_path())
    return MemorySessionRepository()
