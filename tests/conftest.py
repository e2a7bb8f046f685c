"""Pytest configuration for shared prompt library fixtures.

Updates:
  v0.1.0 - 2026-10-15 - Provide temporary repositories, a stepping clock, and wired services.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import pytest

from core.dispatch import CommandDispatcher, register_prompt_handlers
from core.prompt_store import PromptStore
from core.repository import PromptRepository

if TYPE_CHECKING:
    from pathlib import Path


class SteppingClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2026, 1, 1, 9, 0, tzinfo=UTC)
        self.readings: list[datetime] = []

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        self.readings.append(self.current)
        return self.current


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def repository(tmp_path: Path) -> PromptRepository:
    return PromptRepository(tmp_path / "prompts.db")


@pytest.fixture
def store(repository: PromptRepository, clock: SteppingClock) -> PromptStore:
    return PromptStore(repository, clock=clock)


@pytest.fixture
def dispatcher(store: PromptStore) -> CommandDispatcher:
    bound = CommandDispatcher()
    register_prompt_handlers(bound, store)
    return bound
