"""Tests for the CLI path description helper.

Updates: v0.1.0 - 2026-10-18 - Cover missing, present, and directory database paths.
"""

from __future__ import annotations

from pathlib import Path

from cli.utils import describe_path


def test_describe_path_reports_missing_file_created_on_demand(tmp_path: Path) -> None:
    target = tmp_path / "prompts.db"

    assert describe_path(target, allow_missing_file=True) == (
        f"{target} (missing - created on demand)"
    )
    assert describe_path(target) == f"{target} (missing)"


def test_describe_path_flags_missing_parent(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "prompts.db"

    description = describe_path(target, allow_missing_file=True)

    assert description.endswith(f", parent missing: {tmp_path / 'nested'}")


def test_describe_path_reports_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "prompts.db"
    target.write_text("", encoding="utf-8")

    assert describe_path(str(target)) == f"{target} (exists)"


def test_describe_path_rejects_directories(tmp_path: Path) -> None:
    assert describe_path(tmp_path) == f"{tmp_path} (exists but is a directory)"


def test_describe_path_handles_unset_values() -> None:
    assert describe_path(None) == "not set"
    assert describe_path(42) == "not set"
