# File: src/objprint/printing/rule_builder.py
"""
SerializationRuleBuilder: the continuation returned by `PrintingConfig.serialize()`.

The builder is bound to one target (a type or a FieldRef) and to the
configuration it was created from. Each terminal method appends one step to the
target's chain and returns the extended PrintingConfig, never the builder.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from objprint.printing.field_ref import FieldRef
from objprint.printing.serialization_chain import SerializationStep


if TYPE_CHECKING:
    from objprint.printing.printing_config import PrintingConfig


__all__ = [
    "SerializationRuleBuilder",
]


T = TypeVar("T")


class SerializationRuleBuilder(Generic[T]):
    """Pending serialization rule for values of type T (or for one field)."""

    __slots__ = ("_config", "_target")

    def __init__(self, config: PrintingConfig, target: type[T] | FieldRef) -> None:
        self._config = config
        self._target = target

    @property
    def target(self) -> type[T] | FieldRef:
        return self._target

    def using(self, fn: Callable[[T], Any]) -> PrintingConfig:
        """
        Convert the target's values with `fn`.

        Applied to a target that already has a rule, `fn` receives the previous
        step's text rather than the raw value.
        """
        step: SerializationStep = fn
        if isinstance(self._target, FieldRef):
            return self._config.with_field_rule(self._target, step)
        return self._config.with_type_rule(self._target, step)

    def using_format(self, spec: str) -> PrintingConfig:
        """Convert the target's values with `format(value, spec)`, e.g. `".2f"` or `"%Y-%m-%d"`."""
        return self.using(lambda value: format(value, spec))

    def trimmed_to_length(self, max_length: int) -> PrintingConfig:
        """
        Cap the target's text at `max_length` characters.

        :raises ValueError: If `max_length` is negative.
        """
        if max_length < 0:
            raise ValueError(f"max_length must be >= 0, got {max_length}")
        return self.using(lambda text: str(text)[:max_length])

    def __repr__(self) -> str:
        target = self._target if isinstance(self._target, FieldRef) else self._target.__qualname__
        return f"SerializationRuleBuilder({target})"


# End of file: src/objprint/printing/rule_builder.py
