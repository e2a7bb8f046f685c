"""Shared CLI utility functions for prompt library commands.

Updates:
  v0.2.1 - 2026-10-18 - Describe file paths only; drop the unused directory mode.
  v0.2.0 - 2026-10-14 - Add JSON output and argument payload helpers.
  v0.1.0 - 2026-10-11 - Add stdout logging and path description helpers.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from logging import Logger
else:  # pragma: no cover - runtime placeholders for type-only imports
    Logger = Any


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def print_json(value: Any, *, stream: TextIO | None = None) -> None:
    """Write *value* as indented JSON followed by a newline."""
    target = stream or sys.stdout
    target.write(json.dumps(value, ensure_ascii=False, indent=2))
    target.write("\n")


def describe_path(path_value: object, *, allow_missing_file: bool = False) -> str:
    """Return a human-friendly description of a file path's suitability."""
    try:
        path = Path(path_value) if path_value is not None else None
    except TypeError:
        path = None
    if path is None:
        return "not set"

    resolved = path.expanduser()
    if resolved.exists():
        if resolved.is_dir():
            return f"{resolved} (exists but is a directory)"
        return f"{resolved} (exists)"

    message = f"{resolved} (missing)"
    if allow_missing_file:
        message = f"{resolved} (missing - created on demand)"
    parent = resolved.parent
    if not parent.exists():
        message += f", parent missing: {parent}"
    return message


def prompt_fields_payload(args: Any) -> dict[str, Any]:
    """Return a create/update payload built from parsed prompt field flags."""
    payload: dict[str, Any] = {"title": args.title, "content": args.content}
    if getattr(args, "description", None) is not None:
        payload["description"] = args.description
    tags = getattr(args, "tags", None)
    if tags is not None:
        payload["tags"] = list(tags)
    return payload
