"""Tests for execution-context detection and its thread-local overrides."""

from __future__ import annotations

import threading
from collections.abc import Iterator

import pytest

from objprint.base.config import desktop_mode_context, in_desktop_mode, in_test_mode


@pytest.fixture
def no_overrides() -> Iterator[None]:
    in_test_mode(unset_override=True)
    in_desktop_mode(unset_override=True)
    yield
    in_test_mode(unset_override=True)
    in_desktop_mode(unset_override=True)


@pytest.mark.unit
def test_pytest_run_is_test_mode(no_overrides: None) -> None:
    assert in_test_mode() is True


@pytest.mark.unit
def test_test_mode_override(no_overrides: None) -> None:
    assert in_test_mode(override=False) is False
    assert in_test_mode() is False
    assert in_test_mode(unset_override=True) is True


@pytest.mark.unit
def test_desktop_mode_is_off_in_test_mode(no_overrides: None) -> None:
    assert in_desktop_mode() is False


@pytest.mark.unit
def test_no_color_disables_desktop_mode(no_overrides: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    in_test_mode(override=False)
    assert in_desktop_mode() is False


@pytest.mark.unit
def test_desktop_mode_context_restores_previous_state(no_overrides: None) -> None:
    with desktop_mode_context(True):
        assert in_desktop_mode() is True
        with desktop_mode_context(False):
            assert in_desktop_mode() is False
        assert in_desktop_mode() is True
    assert in_desktop_mode() is False


@pytest.mark.unit
def test_overrides_are_thread_local(no_overrides: None) -> None:
    seen: list[bool] = []

    def worker() -> None:
        seen.append(in_desktop_mode())

    with desktop_mode_context(True):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
    assert seen == [False]
