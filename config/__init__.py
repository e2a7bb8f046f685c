"""Configuration helpers for the prompt library.

Updates: v0.1.0 - 2026-10-10 - Expose settings loader and configuration error type.
"""

from .settings import (
    DEFAULT_DB_PATH,
    DEFAULT_LOG_LEVEL,
    PromptLibrarySettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_LOG_LEVEL",
    "PromptLibrarySettings",
    "SettingsError",
    "load_settings",
]
