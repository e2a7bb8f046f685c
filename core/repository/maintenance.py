"""Schema bootstrap helpers for the repository.

Updates:
  v0.1.0 - 2026-10-09 - Create the prompts table on first use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    import sqlite3
    from pathlib import Path


class RepositoryMaintenanceMixin:
    """Tasks that create repository storage."""

    _db_path: Path

    def _ensure_schema(self, conn: sqlite3.Connection) -> None:
        """Create required tables if they do not exist."""
        # AUTOINCREMENT keeps ids of deleted rows from being handed out again.
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS prompts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                description TEXT,
                content TEXT NOT NULL,
                tags TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )


__all__ = ["RepositoryMaintenanceMixin"]
