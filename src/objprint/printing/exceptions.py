"""
Errors raised while building a PrintingConfig.

Rendering itself raises nothing of its own: absent values are a leaf case, and
failures inside user transforms or property getters propagate unchanged.
"""

from __future__ import annotations


__all__ = [
    "ObjectPrintingError",
    "SelectorError",
    "SerializationChainError",
]


class ObjectPrintingError(Exception):
    """Base class for objprint errors."""


class SelectorError(ObjectPrintingError, ValueError):
    """A field selector did not resolve to a plain field access on the owner type."""


class SerializationChainError(ObjectPrintingError, ValueError):
    """A serialization chain was built empty or with a non-callable step."""
