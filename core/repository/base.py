"""Shared repository helpers and SQLite codecs.

Updates:
  v0.2.0 - 2026-10-12 - Use a single ISO-8601 UTC representation for timestamp columns.
  v0.1.0 - 2026-10-09 - Add connection, tag codec, and timestamp helpers.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger("prompt_library.repository")


def ensure_directory(path: Path) -> None:
    """Ensure the directory for the SQLite database exists."""
    path.parent.mkdir(parents=True, exist_ok=True)


def connect(db_path: Path) -> sqlite3.Connection:
    """Return a configured SQLite connection."""
    conn = sqlite3.connect(str(db_path), detect_types=sqlite3.PARSE_DECLTYPES)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    conn.execute("PRAGMA journal_mode = WAL;")
    conn.execute("PRAGMA synchronous = NORMAL;")
    return conn


def encode_tags(tags: Sequence[str] | None) -> str | None:
    """Serialize an ordered tag list to JSON text (or None)."""
    if tags is None:
        return None
    return json.dumps(list(tags), ensure_ascii=False)


def decode_tags(value: str | None) -> list[str] | None:
    """Deserialize a JSON tag column back into an ordered list."""
    if value is None or value in ("", "null"):
        return None
    try:
        parsed: object = json.loads(value)
    except json.JSONDecodeError:
        logger.warning("Stored tags are not valid JSON; keeping raw value")
        return [str(value)]  # degraded fallback
    if isinstance(parsed, list):
        entries = cast("Sequence[object]", parsed)
        return [str(item) for item in entries]
    return [str(parsed)]


def format_timestamp(value: datetime) -> str:
    """Return the canonical stored form of *value* (aware UTC, ISO-8601)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def parse_timestamp(value: Any) -> datetime:
    """Return a timezone-aware datetime parsed from a stored timestamp column."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    try:
        parsed = datetime.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"Unrecognised timestamp value: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


__all__ = [
    "connect",
    "decode_tags",
    "encode_tags",
    "ensure_directory",
    "format_timestamp",
    "logger",
    "parse_timestamp",
]
