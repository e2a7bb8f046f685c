"""Validation and persistence workflows for prompt records.

Updates:
  v0.3.0 - 2026-10-18 - Keep updated_at strictly increasing across updates.
  v0.2.0 - 2026-10-12 - Log update/delete calls that match no stored prompt.
  v0.1.0 - 2026-10-09 - Add PromptStore with list/create/update/delete operations.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Protocol

from models.prompt_record import utc_now

from .exceptions import NotFoundError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import datetime

    from models.prompt_record import PromptRecord

logger = logging.getLogger("prompt_library.store")

__all__ = ["PromptGateway", "PromptStore"]

_MIN_TICK = timedelta(microseconds=1)


class PromptGateway(Protocol):
    """Relational operations PromptStore needs from its backing table."""

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
        """Insert a row and return its generated id."""
        ...

    def select_prompts(self) -> list[PromptRecord]:
        """Return all rows."""
        ...

    def select_prompt(self, prompt_id: int) -> PromptRecord | None:
        """Return one row by id."""
        ...

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
        """Replace a row's editable columns and return the affected count."""
        ...

    def delete_prompt(self, prompt_id: int) -> int:
        """Remove a row and return the affected count."""
        ...


def _require_fields(title: str | None, content: str | None) -> None:
    if not title or not content:
        raise ValidationError("Title and content are required")


def _require_id(prompt_id: int | None) -> None:
    if not prompt_id:
        raise ValidationError("Prompt id is required")


class PromptStore:
    """Validate caller input and run one store operation per request.

    The store is injected so the workflows carry no global state; storage
    failures raised by it propagate to the caller untouched.
    """

    def __init__(
        self,
        repository: PromptGateway,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def list_prompts(self) -> list[PromptRecord]:
        """Return every persisted prompt in storage order."""
        return self._repository.select_prompts()

    def create_prompt(
        self,
        title: str,
        content: str,
        description: str | None = None,
        tags: Sequence[str] | None = None,
    ) -> PromptRecord:
        """Insert a new prompt and return it as re-read from storage."""
        _require_fields(title, content)
        now = self._clock()
        prompt_id = self._repository.insert_prompt(
            title=title,
            description=description,
            content=content,
            tags=list(tags) if tags is not None else None,
            created_at=now,
            updated_at=now,
        )
        record = self._repository.select_prompt(prompt_id)
        if record is None:
            logger.error("Prompt %s vanished immediately after insert", prompt_id)
            raise NotFoundError("Failed to fetch created prompt")
        logger.info("Created prompt %s", record.id)
        return record

    def update_prompt(
        self,
        prompt_id: int,
        title: str,
        content: str,
        description: str | None = None,
        tags: Sequence[str] | None = None,
    ) -> None:
        """Fully replace the editable fields of *prompt_id*."""
        _require_id(prompt_id)
        _require_fields(title, content)
        existing = self._repository.select_prompt(prompt_id)
        if existing is None:
            logger.warning("Update skipped; prompt %s does not exist", prompt_id)
            return
        # updated_at only moves forward, even when the clock stalls or steps back.
        updated_at = max(self._clock(), existing.updated_at + _MIN_TICK)
        updated = self._repository.update_prompt(
            prompt_id,
            title=title,
            description=description,
            content=content,
            tags=list(tags) if tags is not None else None,
            updated_at=updated_at,
        )
        if updated == 0:
            logger.warning("Update skipped; prompt %s was removed concurrently", prompt_id)

    def delete_prompt(self, prompt_id: int) -> None:
        """Permanently remove *prompt_id*; deleting a missing prompt is harmless."""
        _require_id(prompt_id)
        deleted = self._repository.delete_prompt(prompt_id)
        if deleted == 0:
            logger.warning("Delete skipped; prompt %s does not exist", prompt_id)
