"""Common exception classes for core package.

All exceptions inherit from :class:`PromptLibraryError`, allowing dispatch
callers to catch a single base class for any prompt-library failure while
still distinguishing individual error categories when needed.

Updates:
  v0.2.0 - 2026-10-12 - Add UnknownChannelError for command dispatch.
  v0.1.0 - 2026-10-09 - Created module with validation/not-found/storage errors.
"""

from __future__ import annotations


class PromptLibraryError(Exception):
    """Base exception for prompt library failures."""


class ValidationError(PromptLibraryError):
    """Raised when a required field is missing or a payload is malformed."""


class NotFoundError(PromptLibraryError):
    """Raised when a row expected to exist after a write cannot be located."""


class StorageError(PromptLibraryError):
    """Raised when the SQLite backing store reports a failure."""


class UnknownChannelError(PromptLibraryError):
    """Raised when a command is invoked on a channel nobody registered."""


__all__ = [
    "NotFoundError",
    "PromptLibraryError",
    "StorageError",
    "UnknownChannelError",
    "ValidationError",
]
