"""PromptStore validation and persistence workflow tests.

Updates:
  v0.2.0 - 2026-10-18 - Cover unbindable input and stalled clocks.
  v0.1.0 - 2026-10-15 - Cover create/list/update/delete lifecycle and validation paths.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import UTC, datetime
from typing import Any

import pytest

from core.exceptions import NotFoundError, StorageError, ValidationError
from core.prompt_store import PromptStore
from core.repository import PromptRepository
from models.prompt_record import PromptRecord


class _RecordingGateway:
    """Gateway stub that records calls; inserted rows are never found again."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def insert_prompt(self, **_: Any) -> int:
        self.calls.append("insert")
        return 7

    def select_prompts(self) -> list[PromptRecord]:
        self.calls.append("select_all")
        return []

    def select_prompt(self, prompt_id: int) -> PromptRecord | None:
        self.calls.append("select")
        return None

    def update_prompt(self, prompt_id: int, **_: Any) -> int:
        self.calls.append("update")
        return 1

    def delete_prompt(self, prompt_id: int) -> int:
        self.calls.append("delete")
        return 1


def test_create_returns_record_with_defaults(store: PromptStore, clock) -> None:
    record = store.create_prompt("T1", "C1")

    assert record.id > 0
    assert record.title == "T1"
    assert record.content == "C1"
    assert record.description is None
    assert record.tags is None
    assert record.created_at == clock.readings[0]
    assert record.updated_at == record.created_at

    listed = store.list_prompts()
    assert listed == [record]


def test_create_preserves_tag_order(store: PromptStore) -> None:
    record = store.create_prompt("Tagged", "Body", description="desc", tags=["c", "a", "b"])

    assert record.tags == ["c", "a", "b"]
    assert record.description == "desc"
    assert store.list_prompts()[0].tags == ["c", "a", "b"]


def test_create_keeps_tag_values_verbatim(store: PromptStore) -> None:
    tags = ["  padded ", "ünïcode", "", "a,b"]

    record = store.create_prompt("Raw", "Body", tags=tags)

    assert record.tags == tags


def test_create_with_empty_tag_list_round_trips_as_empty(store: PromptStore) -> None:
    record = store.create_prompt("Empty tags", "Body", tags=[])

    assert record.tags == []


@pytest.mark.parametrize(
    ("title", "content"),
    [("", "content"), ("title", ""), ("", ""), (None, "content"), ("title", None)],
)
def test_create_requires_title_and_content(
    store: PromptStore,
    title: Any,
    content: Any,
) -> None:
    with pytest.raises(ValidationError, match="Title and content are required"):
        store.create_prompt(title, content)
    assert store.list_prompts() == []


def test_validation_happens_before_storage_access() -> None:
    gateway = _RecordingGateway()
    store = PromptStore(gateway)

    with pytest.raises(ValidationError):
        store.create_prompt("", "content")
    with pytest.raises(ValidationError):
        store.update_prompt(0, "title", "content")
    with pytest.raises(ValidationError):
        store.update_prompt(3, "title", "")
    with pytest.raises(ValidationError):
        store.delete_prompt(0)

    assert gateway.calls == []


def test_create_raises_not_found_when_row_cannot_be_reread() -> None:
    gateway = _RecordingGateway()
    store = PromptStore(gateway)

    with pytest.raises(NotFoundError, match="Failed to fetch created prompt"):
        store.create_prompt("title", "content")
    assert gateway.calls == ["insert", "select"]


def test_update_replaces_fields_and_bumps_updated_at(store: PromptStore) -> None:
    created = store.create_prompt("T1", "C1", description="old", tags=["old"])

    store.update_prompt(created.id, "T2", "C2", tags=["x"])

    (updated,) = store.list_prompts()
    assert updated.id == created.id
    assert updated.title == "T2"
    assert updated.content == "C2"
    assert updated.tags == ["x"]
    # Omitted description is replaced, not merged.
    assert updated.description is None
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_missing_prompt_is_a_logged_no_op(
    store: PromptStore,
    caplog: pytest.LogCaptureFixture,
) -> None:
    existing = store.create_prompt("Keep", "Me")

    with caplog.at_level(logging.WARNING, logger="prompt_library.store"):
        store.update_prompt(existing.id + 100, "New", "Text")

    assert store.list_prompts() == [existing]
    assert "does not exist" in caplog.text


@pytest.mark.parametrize("prompt_id", [0, None])
def test_update_requires_id(store: PromptStore, prompt_id: Any) -> None:
    with pytest.raises(ValidationError, match="Prompt id is required"):
        store.update_prompt(prompt_id, "title", "content")


def test_delete_removes_prompt_and_tolerates_repeats(store: PromptStore) -> None:
    first = store.create_prompt("One", "1")
    second = store.create_prompt("Two", "2")

    store.delete_prompt(first.id)
    store.delete_prompt(first.id)

    assert [record.id for record in store.list_prompts()] == [second.id]


@pytest.mark.parametrize("prompt_id", [0, None])
def test_delete_requires_id(store: PromptStore, prompt_id: Any) -> None:
    with pytest.raises(ValidationError, match="Prompt id is required"):
        store.delete_prompt(prompt_id)


def test_ids_are_not_reused_after_delete(store: PromptStore) -> None:
    first = store.create_prompt("One", "1")
    store.delete_prompt(first.id)

    second = store.create_prompt("Two", "2")

    assert second.id > first.id


def test_list_returns_prompts_in_insertion_order(store: PromptStore) -> None:
    titles = ["alpha", "beta", "gamma"]
    for title in titles:
        store.create_prompt(title, f"{title} body")

    assert [record.title for record in store.list_prompts()] == titles


def test_timestamps_are_timezone_aware(store: PromptStore) -> None:
    record = store.create_prompt("When", "Now")

    assert isinstance(record.created_at, datetime)
    assert record.created_at.tzinfo is not None
    assert record.updated_at >= record.created_at


def test_storage_errors_propagate_unchanged(
    repository: PromptRepository,
    store: PromptStore,
) -> None:
    with sqlite3.connect(repository.db_path) as conn:
        conn.execute("DROP TABLE prompts;")

    with pytest.raises(StorageError) as excinfo:
        store.list_prompts()
    assert isinstance(excinfo.value.__cause__, sqlite3.Error)


@pytest.mark.parametrize("prompt_id", [2**63, 2**64])
def test_ids_sqlite_cannot_bind_raise_storage_error(store: PromptStore, prompt_id: int) -> None:
    with pytest.raises(StorageError) as excinfo:
        store.delete_prompt(prompt_id)
    assert isinstance(excinfo.value.__cause__, OverflowError)

    with pytest.raises(StorageError):
        store.update_prompt(prompt_id, "T", "C")


@pytest.mark.parametrize(
    ("title", "tags"),
    [("\ud800", None), ("Title", ["ok", "\udfff"])],
)
def test_unencodable_text_raises_storage_error(
    store: PromptStore,
    title: str,
    tags: list[str] | None,
) -> None:
    with pytest.raises(StorageError, match="Failed to insert prompt") as excinfo:
        store.create_prompt(title, "C", tags=tags)
    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
    assert store.list_prompts() == []


def test_update_advances_updated_at_when_clock_stalls(repository: PromptRepository) -> None:
    frozen = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
    store = PromptStore(repository, clock=lambda: frozen)
    created = store.create_prompt("T1", "C1")

    store.update_prompt(created.id, "T2", "C2")
    store.update_prompt(created.id, "T3", "C3")

    (updated,) = store.list_prompts()
    assert updated.created_at == frozen
    assert updated.updated_at > created.updated_at
    assert updated.title == "T3"


def test_update_advances_updated_at_when_clock_steps_back(repository: PromptRepository) -> None:
    readings = iter(
        [datetime(2026, 3, 1, 12, 0, tzinfo=UTC), datetime(2026, 2, 1, 12, 0, tzinfo=UTC)]
    )
    store = PromptStore(repository, clock=lambda: next(readings))
    created = store.create_prompt("T1", "C1")

    store.update_prompt(created.id, "T2", "C2")

    (updated,) = store.list_prompts()
    assert updated.updated_at > created.updated_at
