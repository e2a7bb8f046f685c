"""Printable summaries for prompt library configuration.

Updates:
  v0.1.0 - 2026-10-11 - Render database and logging configuration.
"""

from __future__ import annotations

from config import PromptLibrarySettings

from .utils import describe_path


def print_settings_summary(settings: PromptLibrarySettings) -> None:
    """Emit a readable summary of core configuration and health checks."""
    db_path_desc = describe_path(settings.db_path, allow_missing_file=True)
    lines = [
        "Prompt library configuration summary",
        "------------------------------------",
        f"Database path: {db_path_desc}",
        f"Log level: {settings.log_level}",
    ]
    print("\n".join(lines))
