"""Storage module for To Click Or Not.

This module provides the session repository interface, its implementations
and per-key locking for session updates.

Usage:
    from toclickornot.storage import get_session_repository

    # Get repository using configured backend (from environment)
    sessions = get_session_repository()

    # Or specify backend explicitly
    from toclickornot.storage import StorageBackend
    sessions = get_session_repository(StorageBackend.SQLITE)

Configuration via environment variables:
    TOCLICKORNOT_STORAGE_BACKEND: "memory", "file" or "sqlite" (default: "memory")
    TOCLICKORNOT_SESSIONS_PATH: Path to sessions directory (default: "sessions")
    TOCLICKORNOT_DATABASE_URI: SQLite database path (default: "instance/toclickornot.db")
"""

from .config import (
    StorageBackend,
    get_database_uri,
    get_session_repository,
    get_sessions_path,
    get_storage_backend,
    parse_storage_backend,
)
from .file_repo import FileSessionRepository
from .locks import KeyedLocks
from .memory_repo import MemorySessionRepository
from .repository import SessionKey, SessionRepository, StorageUnavailable
from .sqlite_repo import SQLiteSessionRepository

__all__ = [
    # Abstract interface
    "SessionRepository",
    "SessionKey",
    "StorageUnavailable",
    # Implementations
    "MemorySessionRepository",
    "FileSessionRepository",
    "SQLiteSessionRepository",
    # Locking
    "KeyedLocks",
    # Configuration
    "StorageBackend",
    "get_storage_backend",
    "parse_storage_backend",
    "get_sessions_path",
    "get_database_uri",
    # Factory functions
    "get_session_repository",
]
