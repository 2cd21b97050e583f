"""
CoreFormatter: colored, location-aware formatting for CoreLogger records.
"""

from __future__ import annotations

import logging
import os
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import pytz
from colorama import Fore

import objprint.base.config as cfg
from objprint.base.constants import DEFAULT_LOG_TZ, K_LOG_TZ
from objprint.base.fs_helpers import fs_find_pyproject_toml


__all__ = ["CoreFormatter", "get_color_code", "rgb_code"]


FormatStyle = Literal["%", "{", "$"]
"""Format string style accepted by `CoreFormatter` (and `logging.Formatter`)."""


def rgb_code(r: int, g: int, b: int) -> str:
    """
    Convert RGB values to ANSI escape code for terminal color output.

    :param r: Red component (0-255)
    :param g: Green component (0-255)
    :param b: Blue component (0-255)
    :return str: ANSI escape code for the specified RGB color.
    """
    return f"\033[38;2;{max(0, min(255, r))};{max(0, min(255, g))};{max(0, min(255, b))}m"


COLOR_MAP: dict[str | None, str] = {
    "fileAndLine": rgb_code(4 << 4, 8 << 4, 10 << 4),
    "method": rgb_code(3 << 4, 12 << 4, 10 << 4),
    "TRACE": rgb_code(96, 0, 64),
    "DEBUG": Fore.LIGHTBLACK_EX,
    "INFO": rgb_code(184, 184, 216),
    "WARNING": Fore.YELLOW,
    "ERROR": rgb_code(224, 128, 0),
    "CRITICAL": Fore.RED,
    None: Fore.RESET,
}


def get_color_code(key: str | None = None) -> str:
    """Return the ANSI code for `key`, or "" when output is not meant for a terminal."""
    if not cfg.in_desktop_mode():
        return ""
    if not key or key == "RESET":
        return Fore.RESET
    if key in COLOR_MAP:
        return COLOR_MAP[key]
    if key.startswith("#") and len(key) == 7:
        return rgb_code(*[int(key[i : i + 2], 16) for i in (1, 3, 5)])
    return getattr(Fore, key.upper(), Fore.RESET)


class CoreFormatter(logging.Formatter):
    """
    Formatter that adds `levelName`, `fileAndLine` and `method` record attributes,
    stamps times in the LOG_TZ zone, and colors output in desktop mode.
    """

    DEFAULT_FORMAT = r"%(levelName)s %(asctime)s %(fileAndLine)s %(method)s %(message)s"

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
        *,
        tz: str | None = None,
    ) -> None:
        """
        :param fmt: The format string for log messages.
        :param datefmt: The date format string for log timestamps.
        :param style: The style for the format string (default is "%").
        :param validate: Whether to validate the format strings (default is True).
        :param tz: Time zone name understood by pytz; defaults to LOG_TZ or UTC.
        """
        super().__init__(fmt=fmt or self.DEFAULT_FORMAT, datefmt=datefmt, style=style, validate=validate)
        self.tz = pytz.timezone(tz or os.environ.get(K_LOG_TZ, DEFAULT_LOG_TZ))

    def format(self, record: logging.LogRecord) -> str:
        record.fileAndLine = self.format_fileAndLine(record.pathname, record.lineno)
        record.method = get_color_code("method") + f"{record.funcName}()" + get_color_code()
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()
        try:
            return super().format(record)
        except Exception as exc:
            return format_logging_error(record, exc)

    @staticmethod
    def format_file(file: str) -> str:
        """Return `file` relative to its project root when one is found, else absolute."""
        if not file:
            return "<unknown file>"
        path = Path(file)
        project_file = fs_find_pyproject_toml(start_dir=path.parent) if path.parent.is_dir() else None
        if project_file is not None:
            try:
                return path.relative_to(project_file.parent).as_posix()
            except ValueError:
                pass
        return path.absolute().as_posix()

    def format_fileAndLine(self, file: str, lineno: int) -> str:
        return get_color_code("fileAndLine") + f"{self.format_file(file)}:{lineno}" + get_color_code()

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = datetime.fromtimestamp(record.created, self.tz)
        text = stamp.strftime(datefmt) if datefmt else stamp.isoformat(timespec="milliseconds")
        return get_color_code(record.levelname) + text + get_color_code()


def format_logging_error(record: logging.LogRecord, exc: Exception) -> str:
    """
    Generate a formatted error message when log record formatting fails.

    :param record: The LogRecord that failed to format
    :param exc: The exception that occurred during formatting
    :return: Formatted error message string
    """
    posix_path = Path(getattr(record, "pathname", "<unknown>")).as_posix()
    line: Any = getattr(record, "lineno", "?")
    message_lines = [
        "Internal error: Failed to format log record",
        f"{posix_path}:{line}",
        f"{type(exc).__name__}: {exc}",
        f"record.msg: {getattr(record, 'msg', None)!r}",
        f"record.args: {getattr(record, 'args', None)!r}",
        "",
        *traceback.format_exc().splitlines(),
    ]
    return "\n>> " + "\n>> ".join(message_lines) + "\n\n"
