"""Tests for pyproject discovery and .env loading."""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from objprint.base.fs_helpers import fs_find_pyproject_toml, fs_load_dotenv


@pytest.mark.unit
def test_find_pyproject_toml_walks_up(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    assert fs_find_pyproject_toml(start_dir=nested) == tmp_path / "pyproject.toml"


@pytest.mark.unit
def test_find_pyproject_toml_strict_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Path, "is_file", lambda self: False)
    with pytest.raises(FileNotFoundError):
        fs_find_pyproject_toml(start_dir=tmp_path / "none", strict=True)
    with pytest.warns(UserWarning, match="No pyproject.toml"):
        assert fs_find_pyproject_toml(start_dir=tmp_path / "none", warn=True) is None


@pytest.mark.unit
def test_load_dotenv_from_stream(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OBJPRINT_TEST_VALUE", raising=False)
    assert fs_load_dotenv(stream=io.StringIO("OBJPRINT_TEST_VALUE=from-dotenv\n")) is True
    assert os.environ["OBJPRINT_TEST_VALUE"] == "from-dotenv"
    monkeypatch.delenv("OBJPRINT_TEST_VALUE")


@pytest.mark.unit
def test_load_dotenv_keeps_existing_without_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OBJPRINT_TEST_VALUE", "kept")
    fs_load_dotenv(stream=io.StringIO("OBJPRINT_TEST_VALUE=ignored\n"))
    assert os.environ["OBJPRINT_TEST_VALUE"] == "kept"
    fs_load_dotenv(stream=io.StringIO("OBJPRINT_TEST_VALUE=replaced\n"), override=True)
    assert os.environ["OBJPRINT_TEST_VALUE"] == "replaced"
