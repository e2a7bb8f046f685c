"""Prompt record data model definitions.

Updates:
  v0.2.0 - 2026-10-12 - Add create/update parameter dataclasses for dispatch payloads.
  v0.1.0 - 2026-10-09 - Add PromptRecord dataclass with camelCase payload export.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


def utc_now() -> datetime:
    """Return an aware UTC timestamp."""
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class PromptRecord:
    """Persisted reusable prompt template."""

    id: int
    title: str
    description: str | None
    content: str
    tags: list[str] | None
    created_at: datetime
    updated_at: datetime

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible mapping sent back across the dispatch boundary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "content": self.content,
            "tags": list(self.tags) if self.tags is not None else None,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


@dataclass(slots=True)
class CreatePromptParams:
    """Caller supplied fields for a new prompt."""

    title: str
    content: str
    description: str | None = None
    tags: list[str] | None = field(default=None)


@dataclass(slots=True)
class UpdatePromptParams:
    """Full replacement of an existing prompt's editable fields."""

    id: int
    title: str
    content: str
    description: str | None = None
    tags: list[str] | None = field(default=None)


__all__ = ["CreatePromptParams", "PromptRecord", "UpdatePromptParams", "utc_now"]
