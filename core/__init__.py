"""Core service layer for the prompt library.

Updates:
  v0.2.0 - 2026-10-13 - Export command dispatcher and service factory.
  v0.1.0 - 2026-10-09 - Surface PromptRepository, PromptStore, and the error hierarchy.
"""

from models.prompt_record import CreatePromptParams, PromptRecord, UpdatePromptParams

from .dispatch import PROMPT_CHANNELS, CommandDispatcher, register_prompt_handlers
from .exceptions import (
    NotFoundError,
    PromptLibraryError,
    StorageError,
    UnknownChannelError,
    ValidationError,
)
from .factory import PromptServices, build_prompt_services
from .prompt_store import PromptGateway, PromptStore
from .repository import PromptRepository

__all__ = [
    "CommandDispatcher",
    "CreatePromptParams",
    "NotFoundError",
    "PROMPT_CHANNELS",
    "PromptGateway",
    "PromptLibraryError",
    "PromptRecord",
    "PromptRepository",
    "PromptServices",
    "PromptStore",
    "StorageError",
    "UnknownChannelError",
    "UpdatePromptParams",
    "ValidationError",
    "build_prompt_services",
    "register_prompt_handlers",
]
