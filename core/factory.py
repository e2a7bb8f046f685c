"""Factories for wiring the prompt store and dispatcher from validated settings.

Updates:
  v0.1.0 - 2026-10-10 - Build repository, store, and dispatcher in one call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .dispatch import CommandDispatcher, register_prompt_handlers
from .prompt_store import PromptStore
from .repository import PromptRepository

if TYPE_CHECKING:  # pragma: no cover - typing only
    from config import PromptLibrarySettings
else:  # pragma: no cover - typing only
    PromptLibrarySettings = Any

factory_logger = logging.getLogger("prompt_library.factory")


@dataclass(slots=True, frozen=True)
class PromptServices:
    """Bundle of the objects the launcher hands to its front ends."""

    repository: PromptRepository
    store: PromptStore
    dispatcher: CommandDispatcher


def build_prompt_services(
    settings: PromptLibrarySettings,
    *,
    repository: PromptRepository | None = None,
) -> PromptServices:
    """Return repository, store, and dispatcher configured from *settings*."""
    resolved_repository = repository or PromptRepository(settings.db_path)
    store = PromptStore(resolved_repository)
    dispatcher = CommandDispatcher()
    register_prompt_handlers(dispatcher, store)
    factory_logger.debug(
        "Prompt services ready (database=%s, channels=%s)",
        resolved_repository.db_path,
        ", ".join(dispatcher.channels),
    )
    return PromptServices(repository=resolved_repository, store=store, dispatcher=dispatcher)


__all__ = ["PromptServices", "build_prompt_services"]
