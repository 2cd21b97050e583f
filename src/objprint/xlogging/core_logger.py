# File: src/objprint/xlogging/core_logger.py
"""
Structured logging with environment-driven configuration.

Example:
    >>> from objprint.xlogging.logger_factory import create_logger
    >>> logger = create_logger(__name__)
    >>> logger.info("Application started")
    >>>
    >>> with logger.prefix_with("[RENDER]"):
    ...     logger.debug("Walking %s", some_object)

Features:
- Custom TRACE level below DEBUG
- Levels resolved per logger from LOG_LEVEL / LOG_LEVELS / LOG_LEVEL_<NAME>
- Non-primitive arguments rendered with the default PrintingConfig
- Context-local prefix context manager

Design:
- Only the root logger owns handlers/formatters; CoreLogger instances propagate.
- initialize_root() is the only supported entry point for root setup.
"""

from __future__ import annotations

import contextvars
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, timedelta
from typing import Any, ClassVar, Final, TextIO

from objprint.base.constants import K_LOG_DATEFMT, K_LOG_FORMAT
from objprint.xlogging.logger_constants import TRACE, initialize_logger_constants
from objprint.xlogging.logger_formatter import CoreFormatter
from objprint.xlogging.logger_util import LogLevelConfig, get_root_level_from_environment


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_KWARGS_STANDARD: Final[set[str]] = {"exc_info", "stack_info", "stacklevel", "extra"}
_LOG_ROOT_ATTR_NAME: Final[str] = "_objprint_corelogger_initialized"
_PASSTHROUGH_ARG_TYPES: Final[tuple[type, ...]] = (
    str, int, float, bool, type(None), date, timedelta,
    list, tuple, dict, set, frozenset, BaseException,
)  # fmt: skip

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")


class CoreLogger(logging.Logger):
    """
    Application logger that extends logging.Logger with:

    - A TRACE level below DEBUG.
    - Environment-resolved level at construction, never below the root's level.
    - Rendering of non-primitive args through objprint itself.
    - Prefix context manager for scoped message prefixes.
    """

    _INTERNAL_FRAME_OFFSET: ClassVar[int] = 2  # public method + _emit()

    def __init__(
        self,
        name: str,
        level: int | str = logging.NOTSET,
    ) -> None:
        """
        :param name: The name of the logger, typically the module name.
        :param level: The initial log level. NOTSET resolves the level from the environment.
        """
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", ""}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

        root_level = logging.getLogger().getEffectiveLevel()
        if self.level < root_level:
            self.setLevel(root_level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{type(self).__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def _emit(self, level: int, msg: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        """Normalize arguments, apply the active prefix and hand off to logging.Logger.log()."""
        initialize_root()
        if not self.isEnabledFor(level):
            return

        extra: dict[str, Any] = dict(kwargs.pop("extra", None) or {})
        for key in [k for k in kwargs if k not in _LOG_KWARGS_STANDARD]:
            extra[key] = kwargs.pop(key)

        stacklevel: int = kwargs.pop("stacklevel", 1) + self._INTERNAL_FRAME_OFFSET
        prefix = _log_prefix.get()
        message = f"{prefix}{msg}" if prefix else msg
        super().log(
            level,
            message,
            *_normalize_unsupported_args(args),
            exc_info=kwargs.get("exc_info"),
            stack_info=kwargs.get("stack_info", False),
            stacklevel=stacklevel,
            extra=extra or None,
        )

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(level, msg, args, kwargs)

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        self._emit(TRACE, msg, args, kwargs)

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.INFO, msg, args, kwargs)

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.WARNING, msg, args, kwargs)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.ERROR, msg, args, kwargs)

    def critical(self, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        """Log a message at CRITICAL level with a stack trace."""
        kwargs.setdefault("stack_info", True)
        self._emit(logging.CRITICAL, msg, args, kwargs)

    def exception(self, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        """Log a message at ERROR level with exception info."""
        kwargs.setdefault("exc_info", True)
        self._emit(logging.ERROR, msg, args, kwargs)

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Context manager to prefix all log messages within the current context.

        Supports nesting; uses contextvars so prefixes never leak across
        threads or tasks.

        :param prefix: The prefix string to prepend to all log messages.
        """
        current_prefix = _log_prefix.get()
        token = _log_prefix.set(f"{current_prefix}{prefix} > ")
        try:
            yield
        finally:
            _log_prefix.reset(token)


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
) -> None:
    """
    Idempotently configure the root logger for CoreLogger.

    Behavior:
    - Ensures exactly one stderr StreamHandler with CoreFormatter exists.
    - If `force=True`, removes and recreates the stderr handler.
    - Sets root level to `level` if provided, else to LOG_ROOT_LEVEL, else WARNING if NOTSET.
    - Does not modify non-stderr handlers owned by the host application.

    :param fmt: Format string. Defaults to LOG_FORMAT or the CoreFormatter default.
    :param datefmt: Date format. Defaults to LOG_DATEFMT, else ISO-8601.
    :param level: Root logger level (int or name).
    :param force: Reinitialize even if already initialized.
    """
    root: logging.Logger = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)
    initialize_logger_constants()

    if force:
        root.handlers = [h for h in root.handlers if not _is_stderr_handler(h)]
    _ensure_stderr_coreformatter(fmt=fmt, datefmt=datefmt)

    if level is None:
        level = get_root_level_from_environment()
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
    if level is not None:
        root.setLevel(level)
    elif root.level == logging.NOTSET:
        root.setLevel(logging.WARNING)


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and handler.stream is sys.stderr


def _ensure_stderr_coreformatter(*, fmt: str | None = None, datefmt: str | None = None) -> None:
    """Attach (or upgrade) the single root stderr handler so it uses CoreFormatter."""
    fmt = fmt or os.environ.get(K_LOG_FORMAT) or None
    datefmt = datefmt or os.environ.get(K_LOG_DATEFMT) or None

    root = logging.getLogger()
    stderr_handlers: list[logging.StreamHandler[TextIO]] = [
        h for h in root.handlers if _is_stderr_handler(h)  # type: ignore[misc]
    ]
    if not stderr_handlers:
        handler: logging.StreamHandler[TextIO] = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CoreFormatter(fmt, datefmt))
        root.addHandler(handler)
    elif not any(isinstance(h.formatter, CoreFormatter) for h in stderr_handlers):
        stderr_handlers[0].setFormatter(CoreFormatter(fmt, datefmt))


def _normalize_unsupported_args(args: tuple[Any, ...]) -> tuple[Any, ...]:
    """
    Render structured log arguments to text with the default PrintingConfig.

    Primitives, exceptions and builtin containers pass through unchanged (containers are
    opaque to the renderer and read better as repr). Rendering failures, including
    RecursionError on cyclic graphs, are replaced by a placeholder; a log call
    never raises because of its arguments.
    """
    from objprint.printing.object_printer import print_to_string  # noqa: PLC0415 (import cycle)

    normalized: list[Any] = []
    for arg in args:
        if isinstance(arg, _PASSTHROUGH_ARG_TYPES):
            normalized.append(arg)
            continue
        try:
            normalized.append(print_to_string(arg).rstrip("\n"))
        except Exception as e:
            normalized.append(f"<unprintable: {type(arg).__name__}: {type(e).__name__}>")
    return tuple(normalized)


# End of file: src/objprint/xlogging/core_logger.py
