"""Tests for runtime.validation helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from folder_sprite.runtime import validation as runtime_validation


def test_validate_source_folder_success(tmp_path: Path) -> None:
    assert runtime_validation.validate_source_folder(str(tmp_path)) == tmp_path


def test_validate_source_folder_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Source folder not found"):
        runtime_validation.validate_source_folder(tmp_path / "missing")


def test_validate_source_folder_is_file(tmp_path: Path) -> None:
    path = tmp_path / "a.png"
    path.write_bytes(b"")
    with pytest.raises(NotADirectoryError, match="not a folder"):
        runtime_validation.validate_source_folder(path)


def test_validate_source_folder_unreadable(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(runtime_validation.os, "access", lambda *_: False)
    with pytest.raises(PermissionError, match="not readable"):
        runtime_validation.validate_source_folder(tmp_path)
