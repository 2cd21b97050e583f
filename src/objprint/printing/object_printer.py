# File: src/objprint/printing/object_printer.py
"""
One-call entry points.

Example:
    >>> print_to_string(person)
    'Person\\n\\tname = Ann\\n\\tage = 30\\n'
    >>> print_to_string_with(person, lambda c: c.excluding(lambda p: p.age))
    'Person\\n\\tname = Ann\\n'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

from objprint.printing.printing_config import PrintingConfig


__all__ = [
    "ObjectPrinter",
    "print_to_string",
    "print_to_string_with",
]


class ObjectPrinter:
    """Namespace for creating configurations."""

    def __new__(cls, *_a: object, **_k: object) -> NoReturn:
        raise TypeError(f"{cls.__name__} is a namespace, not instantiable")

    @staticmethod
    def for_type(owner: type) -> PrintingConfig:
        """Return an empty PrintingConfig whose field selectors target `owner`."""
        return PrintingConfig.for_type(owner)


def print_to_string(obj: Any, config: PrintingConfig | None = None) -> str:
    """
    Render `obj` with `config`, or with an empty configuration for `type(obj)`.

    :param obj: Any object, including None.
    :param config: Rules to apply; defaults to no exclusions and no custom serializers.
    :return str: The rendered, newline-terminated text.
    """
    if config is None:
        config = ObjectPrinter.for_type(type(obj))
    return config.print_to_string(obj)


def print_to_string_with(obj: Any, configure: Callable[[PrintingConfig], PrintingConfig]) -> str:
    """Render `obj` with the configuration `configure` builds from an empty one for `type(obj)`."""
    return print_to_string(obj, configure(ObjectPrinter.for_type(type(obj))))


# End of file: src/objprint/printing/object_printer.py
