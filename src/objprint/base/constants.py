from __future__ import annotations

from typing import Final


# Rendering literals

NULL_LITERAL: Final[str] = "None"
"""Emitted in place of an absent value."""

INDENT: Final[str] = "\t"
"""One unit of indentation; a field at nesting level N is prefixed by N + 1 units."""

KV_SEPARATOR: Final[str] = " = "
"""Separates a field name from its rendered value."""

LINE_TERMINATOR: Final[str] = "\n"
"""Appended after every leaf value, custom serialization and structural header."""

# Environment variable names

K_LOG_FORMAT = "LOG_FORMAT"
K_LOG_DATEFMT = "LOG_DATEFMT"
K_LOG_TZ = "LOG_TZ"
K_LOG_ROOT_LEVEL = "LOG_ROOT_LEVEL"

DEFAULT_LOG_TZ = "UTC"
