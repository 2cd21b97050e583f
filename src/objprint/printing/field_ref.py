from __future__ import annotations

from dataclasses import dataclass


__all__ = ["FieldRef"]


@dataclass(frozen=True, slots=True)
class FieldRef:
    """
    Identity of one declared field: the declaring class plus the field name.

    Two fields with the same name on different owners are different fields.
    `owner` is the class in the MRO that declares the field, so an inherited
    field keeps a single identity across subclasses.
    """

    owner: type
    """The class that declares the field."""

    name: str
    """The attribute name."""

    def __str__(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"
