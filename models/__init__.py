"""Data models for the prompt library.

Updates: v0.1.0 - 2026-10-09 - Export PromptRecord and dispatch parameter dataclasses.
"""

from .prompt_record import CreatePromptParams, PromptRecord, UpdatePromptParams

__all__ = [
    "CreatePromptParams",
    "PromptRecord",
    "UpdatePromptParams",
]
