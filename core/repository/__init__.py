"""SQLite-backed repository for persistent prompt storage.

Updates:
  v0.2.0 - 2026-10-12 - Raise StorageError from the shared core exception hierarchy.
  v0.1.0 - 2026-10-09 - Compose schema bootstrap and prompt table mixins.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

from ..exceptions import StorageError
from .base import (
    connect as _connect,
    decode_tags,
    encode_tags,
    ensure_directory as _ensure_directory,
)
from .maintenance import RepositoryMaintenanceMixin
from .prompts import PromptTableMixin


class PromptRepository(RepositoryMaintenanceMixin, PromptTableMixin):
    """Compose repository mixins for SQLite-backed storage."""

    def __init__(self, db_path: str | Path) -> None:
        """Initialise repository storage and ensure the schema exists."""
        self._db_path = Path(db_path)
        _ensure_directory(self._db_path)
        try:
            with _connect(self._db_path) as conn:
                self._ensure_schema(conn)
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to initialise SQLite schema at {self._db_path}") from exc

    @property
    def db_path(self) -> Path:
        """Return the SQLite database location."""
        return self._db_path


__all__ = [
    "PromptRepository",
    "StorageError",
    "decode_tags",
    "encode_tags",
]
