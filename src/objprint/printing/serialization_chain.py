"""
SerializationChain: an ordered pipeline of string-producing steps.

Step 0 converts the raw value to text; every later step post-processes the
previous step's text (truncation, casing, decoration). Registering `f` then `g`
therefore renders `g(f(value))`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from objprint.base.constants import LINE_TERMINATOR
from objprint.printing.exceptions import SerializationChainError


__all__ = [
    "SerializationChain",
    "SerializationStep",
]

SerializationStep: TypeAlias = Callable[[Any], Any]
"""
A single transformation: the raw value (step 0) or the previous text (later steps) -> text.

Non-string results are coerced with str() before the next step runs.
"""


@dataclass(frozen=True, slots=True)
class SerializationChain:
    """Immutable, never-empty sequence of serialization steps, applied in insertion order."""

    steps: tuple[SerializationStep, ...]

    def __post_init__(self) -> None:
        if not self.steps:
            raise SerializationChainError("a serialization chain needs at least one step")
        for step in self.steps:
            if not callable(step):
                raise SerializationChainError(f"serialization step is not callable: {step!r}")

    @classmethod
    def of(cls, step: SerializationStep) -> SerializationChain:
        """Create a one-step chain."""
        return cls((step,))

    def then(self, step: SerializationStep) -> SerializationChain:
        """Return a new chain with `step` appended; this chain is unchanged."""
        return SerializationChain((*self.steps, step))

    def compose(self, value: Any) -> str:
        """Run every step over `value` and return the final text."""
        first, *rest = self.steps
        result = str(first(value))
        for step in rest:
            result = str(step(result))
        return result

    def apply(self, value: Any) -> str:
        """Run the chain and terminate the line, ready to be emitted by the renderer."""
        return self.compose(value) + LINE_TERMINATOR

    def __len__(self) -> int:
        return len(self.steps)
