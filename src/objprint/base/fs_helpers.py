# File: src/objprint/base/fs_helpers.py
"""
Filesystem lookups used by the logging layer.
"""

from __future__ import annotations

import logging
import warnings
from os import PathLike
from pathlib import Path
from typing import IO, TypeAlias

import dotenv


__all__ = [
    "StrPath",
    "fs_find_pyproject_toml",
    "fs_load_dotenv",
]

StrPath: TypeAlias = str | PathLike[str]

_fs_pyproject_toml_cache: dict[Path, Path] = {}


def fs_find_pyproject_toml(
    *,
    start_dir: Path | None = None,
    strict: bool = False,
    warn: bool = False,
) -> Path | None:
    """
    Return the absolute path of the nearest `pyproject.toml` file.

    :param start_dir: The directory to start searching from, default is the current working directory.
    :param strict: If True, raises `FileNotFoundError` if the file is not found, default is False.
    :param warn: If True, emits a `UserWarning` if the file is not found, default is False.
    :return: The absolute path of the nearest `pyproject.toml` file, or None.
    :raises FileNotFoundError: If no file is found and `strict` is True.
    """
    start_dir = (start_dir or Path.cwd()).absolute()
    cached = _fs_pyproject_toml_cache.get(start_dir)
    if cached is not None:
        return cached

    for dir in [start_dir, *start_dir.parents]:
        candidate = dir / "pyproject.toml"
        if candidate.is_file():
            _fs_pyproject_toml_cache[start_dir] = candidate
            return candidate

    if strict:
        raise FileNotFoundError(f"No pyproject.toml found for {start_dir}")
    if warn:
        warnings.warn(
            message=f"No pyproject.toml found for {start_dir}.",
            category=UserWarning,
            stacklevel=2,
        )
    return None


def fs_load_dotenv(
    *,
    logger: logging.Logger | None = None,
    dotenv_path: StrPath | None = None,
    stream: IO[str] | None = None,
    override: bool = False,
    encoding: str | None = "utf-8",
) -> bool:
    """
    Parse a .env file and load the variables found into the environment.

    If both `dotenv_path` and `stream` are `None`, `find_dotenv()` locates the
    file with its default parameters.

    :param logger: If supplied, python-dotenv reports through it and runs verbose.
    :param dotenv_path: Absolute or relative path to the .env file.
    :param stream: Text stream with .env content, used if `dotenv_path` is `None`.
    :param override: Whether values from the file replace existing variables.
    :return: True if at least one environment variable is set else False
    """
    verbose = False
    if logger is not None:
        dotenv.main.logger = logger
        verbose = True
    return dotenv.load_dotenv(
        dotenv_path=dotenv_path,
        stream=stream,
        verbose=verbose,
        override=override,
        encoding=encoding,
    )


# End of file: src/objprint/base/fs_helpers.py
