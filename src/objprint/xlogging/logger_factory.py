# File: src/objprint/xlogging/logger_factory.py
"""
Logger factory for creating and configuring CoreLogger instances.

Loggers are created through logging.getLogger() so they take part in the
normal logging hierarchy (parent relationships, propagation, pytest caplog).
"""

import logging
import sys
from pathlib import Path

from objprint.xlogging.core_logger import CoreLogger


__all__ = ["create_logger"]


def create_logger(
    name: str | None = None,
    *,
    level: int | str | None = None,
    stacklevel: int = 1,
) -> CoreLogger:
    """
    Return a CoreLogger with a consistent, context-aware name.

    - Normal imports use the given name (usually `__name__`).
    - "__main__" is replaced by the stem of the running script.
    - A missing name is derived from the calling module.

    :raises TypeError: If a plain logging.Logger already owns the name.
    """
    logger_name: str = name or ""
    if logger_name == "__main__":
        arg0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
        logger_name = arg0.stem if arg0 and arg0.exists() else "embedded_main"
    if not logger_name:
        logger_name = _caller_module_name(stacklevel=stacklevel)

    existing = logging.Logger.manager.loggerDict.get(logger_name)
    if isinstance(existing, CoreLogger):
        if level is not None:
            existing.setLevel(level)
        return existing

    logger = _get_core_logger_from_logging(logger_name)
    if level is not None:
        logger.setLevel(level)
    return logger


def _get_core_logger_from_logging(name: str) -> CoreLogger:
    """
    Create or retrieve a CoreLogger through logging.getLogger().

    Temporarily sets CoreLogger as the logger class so the instance is wired
    into the logging hierarchy.
    """
    logging_class = logging.getLoggerClass()
    if logging_class is not CoreLogger:
        logging.setLoggerClass(CoreLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        if logging_class is not CoreLogger:
            logging.setLoggerClass(logging_class)
    if not isinstance(logger, CoreLogger):
        raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    return logger


def _caller_module_name(*, stacklevel: int = 1) -> str:
    """Return the `__name__` of the module `stacklevel` frames above the caller."""
    frame = sys._getframe(stacklevel + 1)
    try:
        name: str = frame.f_globals.get("__name__", "")
    finally:
        del frame
    if not name or name == "__main__":
        executable = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
        name = Path(executable).stem
    return name


# End of file: src/objprint/xlogging/logger_factory.py
