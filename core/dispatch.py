"""Named command dispatch between the UI layer and the prompt store.

The UI process sends ``(channel, payload)`` pairs where payloads are already
deserialised JSON values. Handlers translate them into typed parameters, call
:class:`core.prompt_store.PromptStore`, and return JSON-compatible results.

Updates:
  v0.3.0 - 2026-10-18 - Reject ids outside the SQLite integer range.
  v0.2.0 - 2026-10-13 - Validate payload shapes before touching the store.
  v0.1.0 - 2026-10-10 - Add CommandDispatcher with logged handlers and prompt channels.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from models.prompt_record import CreatePromptParams, UpdatePromptParams

from .exceptions import UnknownChannelError, ValidationError

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from .prompt_store import PromptStore

logger = logging.getLogger("prompt_library.dispatch")

CommandHandler = Callable[[Any], Any]

# SQLite rowids are signed 64-bit integers.
_MIN_ROW_ID = -(2**63)
_MAX_ROW_ID = 2**63 - 1

PROMPT_CHANNELS: tuple[str, ...] = (
    "prompts:list",
    "prompts:create",
    "prompts:update",
    "prompts:delete",
)


class CommandDispatcher:
    """Route channel invocations to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    @property
    def channels(self) -> tuple[str, ...]:
        """Return registered channel names in registration order."""
        return tuple(self._handlers)

    def register(self, channel: str, handler: CommandHandler) -> None:
        """Bind *handler* to *channel*, wrapping it with invocation logging."""
        if channel in self._handlers:
            raise ValueError(f"Handler already registered for channel '{channel}'")
        self._handlers[channel] = _logged(channel, handler)

    def invoke(self, channel: str, payload: Any = None) -> Any:
        """Run the handler bound to *channel* and return its result."""
        handler = self._handlers.get(channel)
        if handler is None:
            raise UnknownChannelError(f"No handler registered for channel '{channel}'")
        return handler(payload)


def _logged(channel: str, handler: CommandHandler) -> CommandHandler:
    def _wrapper(payload: Any) -> Any:
        logger.debug("Dispatching %s", channel)
        try:
            return handler(payload)
        except Exception as exc:
            logger.error("Error in %s: %s", channel, exc)
            raise

    return _wrapper


def _require_mapping(payload: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError(f"{label} payload must be an object")
    return payload


def _optional_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(f"'{key}' must be a string")


def _optional_tags(payload: Mapping[str, Any]) -> list[str] | None:
    value = payload.get("tags")
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise ValidationError("'tags' must be a list of strings")
    return list(value)


def _optional_id(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Prompt id must be an integer")
    if not _MIN_ROW_ID <= value <= _MAX_ROW_ID:
        raise ValidationError("Prompt id is out of range")
    return value


def parse_create_params(payload: Any) -> CreatePromptParams:
    """Return typed create parameters from a deserialised payload."""
    data = _require_mapping(payload, "Create")
    return CreatePromptParams(
        title=_optional_str(data, "title") or "",
        content=_optional_str(data, "content") or "",
        description=_optional_str(data, "description"),
        tags=_optional_tags(data),
    )


def parse_update_params(payload: Any) -> UpdatePromptParams:
    """Return typed update parameters from a deserialised payload."""
    data = _require_mapping(payload, "Update")
    return UpdatePromptParams(
        id=_optional_id(data.get("id")) or 0,
        title=_optional_str(data, "title") or "",
        content=_optional_str(data, "content") or "",
        description=_optional_str(data, "description"),
        tags=_optional_tags(data),
    )


def register_prompt_handlers(dispatcher: CommandDispatcher, store: PromptStore) -> None:
    """Bind the ``prompts:*`` channels to *store*."""

    def _list(_: Any) -> list[dict[str, Any]]:
        return [record.to_payload() for record in store.list_prompts()]

    def _create(payload: Any) -> dict[str, Any]:
        params = parse_create_params(payload)
        record = store.create_prompt(
            params.title,
            params.content,
            description=params.description,
            tags=params.tags,
        )
        return record.to_payload()

    def _update(payload: Any) -> None:
        params = parse_update_params(payload)
        store.update_prompt(
            params.id,
            params.title,
            params.content,
            description=params.description,
            tags=params.tags,
        )

    def _delete(payload: Any) -> None:
        store.delete_prompt(_optional_id(payload) or 0)

    dispatcher.register("prompts:list", _list)
    dispatcher.register("prompts:create", _create)
    dispatcher.register("prompts:update", _update)
    dispatcher.register("prompts:delete", _delete)


__all__ = [
    "CommandDispatcher",
    "CommandHandler",
    "PROMPT_CHANNELS",
    "parse_create_params",
    "parse_update_params",
    "register_prompt_handlers",
]
