# File: src/objprint/base/config.py
"""
Execution context detection utilities.

This module answers two questions that change how output is decorated:
whether the code runs under a test runner, and whether log output is meant
for an interactive terminal. Overrides are kept in thread-local storage so
that a test (or a thread) can force a mode without leaking it elsewhere.

Exports:
- in_test_mode(): check or override whether code is in test mode.
- in_desktop_mode(): check or override whether output goes to a human.
- desktop_mode_context(): temporarily force desktop mode on or off.
"""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


__all__ = [
    "desktop_mode_context",
    "in_desktop_mode",
    "in_test_mode",
]

_tls = threading.local()


@dataclass
class TLSAttrs:
    """Thread-local flags for environment context."""

    in_test_mode_override: bool | None = None
    in_desktop_mode_override: bool | None = None


def _get_tls() -> TLSAttrs:
    """Return the current thread's TLSAttrs instance, initializing if needed."""
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


def in_test_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Check if running in test mode, with optional override.

    Detection order:
      1. Explicit override (thread-local).
      2. Presence of pytest/unittest in sys.modules.
      3. Known environment variables (e.g. PYTEST_CURRENT_TEST, CI).

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if test mode is active, False otherwise.
    """
    tls = _get_tls()
    if unset_override:
        tls.in_test_mode_override = None
    if override is not None:
        tls.in_test_mode_override = override
        return override
    if tls.in_test_mode_override is not None:
        return tls.in_test_mode_override
    if "pytest" in sys.modules or "unittest" in sys.modules:
        return True

    env = os.environ
    return bool(
        any(env.get(k) for k in ("PYTEST_CURRENT_TEST", "PYTEST_RUNNING", "UNITTEST_RUNNING"))
        or env.get("CI") == "true"
        or env.get("APP_TEST_MODE") == "1"
    )


def in_desktop_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Determine if output should be decorated (colors) for interactive display.

    Rules:
      - Explicit override wins.
      - NO_COLOR in the environment disables desktop mode.
      - Returns False in test mode so captured output stays plain.
      - Otherwise True when stderr is a terminal.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if desktop mode is active, False otherwise.
    """
    tls = _get_tls()
    if unset_override:
        tls.in_desktop_mode_override = None
    if override is not None:
        tls.in_desktop_mode_override = override
        return override
    if tls.in_desktop_mode_override is not None:
        return tls.in_desktop_mode_override

    if os.environ.get("NO_COLOR"):
        return False
    if in_test_mode():
        return False
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def desktop_mode_context(enabled: bool) -> Iterator[None]:
    """
    Context manager that forces desktop mode for the current thread.

    Restores the previous override on exit. Nested contexts are supported.
    """
    tls = _get_tls()
    previous_state = tls.in_desktop_mode_override
    tls.in_desktop_mode_override = enabled
    try:
        yield
    finally:
        tls.in_desktop_mode_override = previous_state


# End of file: src/objprint/base/config.py
