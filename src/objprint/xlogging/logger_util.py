"""
Environment variable-driven log level configuration.

Two sources are supported:
- Pattern-based DSL strings in LOG_LEVEL / LOG_LEVELS, e.g. "objprint.*:DEBUG; WARNING"
- Per-logger overrides in variables like LOG_LEVEL_OBJPRINT_PRINTING_RENDERER

A DSL fragment without a pattern sets the default level. A module suffix on the
variable name is converted by mapping "_" to "." and "__" to "_".

This module resolves the desired level for a given logger name; it does not
lower the root logger's level. To lower the global threshold, set LOG_ROOT_LEVEL
or call initialize_root(level=...) from objprint.xlogging.core_logger.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Final, NamedTuple

from objprint.base.constants import K_LOG_ROOT_LEVEL
from objprint.base.fs_helpers import fs_load_dotenv
from objprint.xlogging.logger_constants import level_names_mapping


__all__ = [
    "LogEnvVar",
    "LogLevelConfig",
    "get_root_level_from_environment",
]

_LOG_VAR_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_LOG_VAR_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


def _level_from_text(txt: str, level_map: dict[str, int]) -> int | None:
    """Return numeric level from a name or decimal number string, else None."""
    s = txt.strip().strip("\"'")
    if not s:
        return None
    if s.isdigit():
        return int(s, 10)
    lvl = level_map.get(s.upper())
    if lvl is None or lvl == logging.NOTSET:
        return None
    return lvl


def get_root_level_from_environment() -> int | None:
    """Return the root logger level from LOG_ROOT_LEVEL, or None if unset or invalid."""
    fs_load_dotenv()
    raw = os.environ.get(K_LOG_ROOT_LEVEL)
    if not raw:
        return None
    return _level_from_text(raw, level_names_mapping())


@dataclass(slots=True)
class LogEnvVar:
    """
    Parsed representation of a log-level environment variable.

    Recognizes names starting with LOG_LEVEL or LOG_LEVELS, and records the
    target module encoded in the suffix along with the raw value.
    """

    NAME_RX: ClassVar[re.Pattern[str]] = re.compile(
        r"""
        ^(?P<BASENAME>LOG_LEVELS?)          # LOG_LEVEL or LOG_LEVELS
        (?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$  # optional suffix
        """,
        re.VERBOSE,
    )

    name: str = field(default="", repr=False)
    module: str = ""
    value: str = field(default="", repr=False)

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if the given (name, value) is valid, else None."""
        re_match = cls.NAME_RX.match(name)
        if re_match is None:
            return None
        suffix: str = re_match["SUFFIX"].lstrip("_")
        if not suffix or suffix.upper() == "ROOT":
            module = ""
        else:
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(name=name, module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield LogEnvVar instances for all matching environment variables."""
        fs_load_dotenv()
        for name, value in sorted(os.environ.items(), reverse=True):
            env_var = cls.from_env_var(name, value)
            if env_var:
                yield env_var


class LogEnvPatternLevel(NamedTuple):
    """Mapping from a pattern string to an integer log level."""

    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve log levels using environment variables.

    Precedence: exact > ancestor > glob (longest fixed prefix) > default > fallback.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    def update_from_environment(self) -> None:
        """Rebuild pattern->level mappings from current environment."""
        self.pattern_to_level.clear()
        level_map = level_names_mapping()
        for var in LogEnvVar.from_environ():
            for dsl in self.parse_log_var(var, level_map):
                self.pattern_to_level[dsl.pattern] = dsl.level

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the effective log level for a logger name."""
        name_lc = logger_name.lower()
        lc_map: dict[str, int] = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        if name_lc in lc_map:
            return lc_map[name_lc]

        for anc in self._ancestors(name_lc):
            if anc in lc_map:
                return lc_map[anc]

        best_level: int | None = None
        best_score = -1
        for pat, level in lc_map.items():
            if not self._is_glob_pattern(pat) or not fnmatch.fnmatch(name_lc, pat):
                continue
            score = self._glob_specificity(pat)
            if score > best_score:
                best_score, best_level = score, level
        if best_level is not None:
            return best_level

        return self.pattern_to_level.get("", default)

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the singleton LogLevelConfig instance, creating it if needed."""
        global _log_level_config_instance
        if not _log_level_config_instance:
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    @staticmethod
    def parse_log_var(var: LogEnvVar, level_map: dict[str, int]) -> Iterator[LogEnvPatternLevel]:
        """Parse one LogEnvVar into pattern->level mappings, skipping unknown levels."""
        for fragment in _LOG_VAR_FRAGMENT_SEPARATOR_RX.split(var.value):
            pattern_level = fragment.strip()
            if not pattern_level:
                continue

            parts = _LOG_VAR_ASSIGNMENT_OPERATOR_RX.split(pattern_level, maxsplit=1)
            if len(parts) == 2:
                pattern, level_txt = parts[0].strip().strip("'\""), parts[1]
            else:
                pattern, level_txt = "", parts[0]

            if var.module:
                pattern = var.module if pattern in {"", "root"} else f"{var.module}.{pattern}"
            if pattern.lower() == "root":
                pattern = ""

            level_num = _level_from_text(level_txt, level_map)
            if level_num is None:
                continue
            yield LogEnvPatternLevel(pattern, level_num)

    @staticmethod
    def _is_glob_pattern(pattern: str) -> bool:
        return any(ch in pattern for ch in "*?[")

    @staticmethod
    def _ancestors(logger_name: str) -> list[str]:
        """Return ancestor names of a dotted logger path, most specific first."""
        parts = logger_name.split(".")
        return [".".join(parts[:i]) for i in range(len(parts) - 1, 0, -1)]

    @staticmethod
    def _glob_specificity(pattern: str) -> int:
        """Length of fixed prefix before any wildcard."""
        return min((i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern))
