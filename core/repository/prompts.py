"""Prompt table persistence helpers.

Updates:
  v0.3.0 - 2026-10-18 - Report unbindable ids and text as StorageError.
  v0.2.0 - 2026-10-12 - Report affected row counts from update and delete.
  v0.1.0 - 2026-10-09 - Add insert/select/update/delete helpers for the prompts table.
"""

from __future__ import annotations

import sqlite3
from typing import TYPE_CHECKING, ClassVar

from models.prompt_record import PromptRecord

from ..exceptions import StorageError
from .base import (
    connect as _connect,
    decode_tags as _decode_tags,
    encode_tags as _encode_tags,
    format_timestamp as _format_timestamp,
    parse_timestamp as _parse_timestamp,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime
    from pathlib import Path

# Driver errors plus values sqlite3 cannot bind (out-of-range ints, lone surrogates).
_STORAGE_FAILURES = (sqlite3.Error, OverflowError, UnicodeEncodeError)


class PromptTableMixin:
    """CRUD helpers for the prompts table."""

    _db_path: Path

    _COLUMNS: ClassVar[tuple[str, ...]] = (
        "title",
        "description",
        "content",
        "tags",
        "created_at",
        "updated_at",
    )

    def insert_prompt(
        self,
        *,
        title: str,
        description: str | None,
        content: str,
        tags: Sequence[str] | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> int:
        """Insert a prompt row and return the generated identifier."""
        payload = {
            "title": title,
            "description": description,
            "content": content,
            "tags": _encode_tags(tags),
            "created_at": _format_timestamp(created_at),
            "updated_at": _format_timestamp(updated_at),
        }
        column_list = ", ".join(self._COLUMNS)
        placeholders = ", ".join(f":{column}" for column in self._COLUMNS)
        query = f"INSERT INTO prompts ({column_list}) VALUES ({placeholders});"
        try:
            with _connect(self._db_path) as conn:
                cursor = conn.execute(query, payload)
        except _STORAGE_FAILURES as exc:
            raise StorageError("Failed to insert prompt") from exc
        if cursor.lastrowid is None:  # pragma: no cover - sqlite always assigns a rowid
            raise StorageError("SQLite did not report an id for the inserted prompt")
        return int(cursor.lastrowid)

    def select_prompts(self) -> list[PromptRecord]:
        """Return every stored prompt in ascending id order."""
        try:
            with _connect(self._db_path) as conn:
                rows = conn.execute("SELECT * FROM prompts ORDER BY id;").fetchall()
        except _STORAGE_FAILURES as exc:
            raise StorageError("Failed to list prompts") from exc
        return [self._row_to_prompt(row) for row in rows]

    def select_prompt(self, prompt_id: int) -> PromptRecord | None:
        """Return the prompt with *prompt_id*, or None when absent."""
        try:
            with _connect(self._db_path) as conn:
                row = conn.execute(
                    "SELECT * FROM prompts WHERE id = ?;",
                    (prompt_id,),
                ).fetchone()
        except _STORAGE_FAILURES as exc:
            raise StorageError(f"Failed to load prompt {prompt_id}") from exc
        if row is None:
            return None
        return self._row_to_prompt(row)

    def update_prompt(
        self,
        prompt_id: int,
        *,
        title: str,
        description: str | None,
        content: str,
        tags: Sequence[str] | None,
        updated_at: datetime,
    ) -> int:
        """Replace the editable columns of a prompt; return the number of rows changed."""
        payload = {
            "id": prompt_id,
            "title": title,
            "description": description,
            "content": content,
            "tags": _encode_tags(tags),
            "updated_at": _format_timestamp(updated_at),
        }
        assignments = ", ".join(f"{column} = :{column}" for column in payload if column != "id")
        query = f"UPDATE prompts SET {assignments} WHERE id = :id;"
        try:
            with _connect(self._db_path) as conn:
                return conn.execute(query, payload).rowcount
        except _STORAGE_FAILURES as exc:
            raise StorageError(f"Failed to update prompt {prompt_id}") from exc

    def delete_prompt(self, prompt_id: int) -> int:
        """Delete a prompt; return the number of rows removed."""
        try:
            with _connect(self._db_path) as conn:
                return conn.execute("DELETE FROM prompts WHERE id = ?;", (prompt_id,)).rowcount
        except _STORAGE_FAILURES as exc:
            raise StorageError(f"Failed to delete prompt {prompt_id}") from exc

    def _row_to_prompt(self, row: sqlite3.Row) -> PromptRecord:
        """Hydrate PromptRecord from SQLite row."""
        try:
            created_at = _parse_timestamp(row["created_at"])
            updated_at = _parse_timestamp(row["updated_at"])
        except ValueError as exc:
            raise StorageError(f"Prompt {row['id']} has a corrupt timestamp") from exc
        return PromptRecord(
            id=int(row["id"]),
            title=str(row["title"]),
            description=row["description"],
            content=str(row["content"]),
            tags=_decode_tags(row["tags"]),
            created_at=created_at,
            updated_at=updated_at,
        )


__all__ = ["PromptTableMixin"]
