# File: src/objprint/printing/introspection.py
"""
Field enumeration for structural rendering.

Given a type, produce its ordered field descriptors; given an instance and a
descriptor, read the value. Declaration order is the order the runtime reports:

1. Data fields: `dataclasses.fields()` for dataclasses, otherwise public
   annotated class attributes (bases first, ClassVar excluded).
2. Instance attributes found in `vars(obj)` or `__slots__` that no annotation
   declares (plain classes that assign attributes in `__init__`).
3. Public `property` objects, bases first.

Names starting with "_" are never enumerated.
"""

from __future__ import annotations

import dataclasses
import enum
import inspect
import types
import typing
import uuid
from collections.abc import Iterator
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache
from pathlib import PurePath
from typing import Any, ClassVar, Final, Literal, TypeAlias

from objprint.printing.field_ref import FieldRef
from objprint.xlogging.logger_factory import create_logger


__all__ = [
    "LEAF_TYPES",
    "FieldInfo",
    "FieldKind",
    "field_named",
    "fields_of",
    "instance_fields",
    "is_leaf",
    "is_leaf_type",
    "read_field",
]

_LOG = create_logger(__name__)

_FIELDS_CACHE_SIZE: Final = 1024

FieldKind: TypeAlias = Literal["field", "attribute", "property"]

LEAF_TYPES: Final[tuple[type, ...]] = (
    int,  # includes bool
    float,
    complex,
    Decimal,
    Fraction,
    str,
    bytes,
    datetime,
    date,
    time,
    timedelta,
    uuid.UUID,
    PurePath,
    enum.Enum,
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)
"""Types rendered with str() and never descended into."""


@dataclasses.dataclass(frozen=True, slots=True)
class FieldInfo:
    """Descriptor of one renderable field of a type."""

    ref: FieldRef
    """Identity of the field (declaring class + name)."""

    declared_type: type | None = None
    """The annotated class, or None when unannotated, a union/generic, or unresolvable."""

    kind: FieldKind = "field"
    """Where the field was found: a data field, an undeclared instance attribute, or a property."""

    @property
    def name(self) -> str:
        return self.ref.name


def is_leaf(value: object) -> bool:
    return isinstance(value, LEAF_TYPES)


def is_leaf_type(cls: type) -> bool:
    return issubclass(cls, LEAF_TYPES)


@lru_cache(maxsize=_FIELDS_CACHE_SIZE)
def fields_of(cls: type) -> tuple[FieldInfo, ...]:
    """
    Return the class-level field descriptors of `cls`: data fields, then properties.

    Leaf types have no fields. Results for the most recently used classes are cached.
    """
    if is_leaf_type(cls):
        return ()

    hints = _resolved_hints(cls)
    mro_annotations: list[tuple[type, dict[str, Any]]] = [
        (klass, _own_annotations(klass)) for klass in cls.__mro__ if klass is not object
    ]

    names: list[str] = []
    if dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls)]
    else:
        for _klass, annotations in reversed(mro_annotations):
            for name, raw in annotations.items():
                if name not in names and not _is_classvar(hints.get(name, raw)):
                    names.append(name)

    infos: list[FieldInfo] = []
    for name in names:
        if name.startswith("_"):
            continue
        owner, raw = next(
            ((klass, ann[name]) for klass, ann in mro_annotations if name in ann),
            (cls, None),
        )
        infos.append(FieldInfo(FieldRef(owner, name), _as_class(hints.get(name, raw)), "field"))

    seen = set(names)
    for name, prop in _public_properties(cls):
        if name in seen:
            continue
        seen.add(name)
        owner = next(klass for klass in cls.__mro__ if name in vars(klass))
        return_hint = _resolved_hints(prop.fget).get("return") if prop.fget else None
        infos.append(FieldInfo(FieldRef(owner, name), _as_class(return_hint), "property"))

    _LOG.trace("fields_of(%s) = %s", cls.__qualname__, ", ".join(i.name for i in infos))
    return tuple(infos)


def field_named(cls: type, name: str) -> FieldInfo | None:
    """Return the class-level descriptor called `name`, or None."""
    return next((info for info in fields_of(cls) if info.name == name), None)


def instance_fields(obj: object) -> tuple[FieldInfo, ...]:
    """Return the ordered field descriptors for rendering `obj`."""
    cls = type(obj)
    declared = fields_of(cls)
    if is_leaf_type(cls):
        return declared
    known = {info.name for info in declared}
    attributes = tuple(
        FieldInfo(FieldRef(cls, name), None, "attribute")
        for name in _instance_attribute_names(obj)
        if name not in known and not name.startswith("_")
    )
    data = tuple(info for info in declared if info.kind == "field")
    properties = tuple(info for info in declared if info.kind == "property")
    return data + attributes + properties


def read_field(obj: object, info: FieldInfo) -> Any:
    """Read the current value of a field; exceptions from property getters propagate."""
    return getattr(obj, info.name)


def _resolved_hints(target: Any) -> dict[str, Any]:
    """Return typing.get_type_hints(target), or {} when forward references cannot be resolved."""
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError, AttributeError, SyntaxError) as exc:
        _LOG.debug(
            "Unresolved annotations on %s: %s: %s",
            getattr(target, "__qualname__", type(target).__name__),
            type(exc).__name__,
            exc,
        )
        return {}


def _own_annotations(klass: type) -> dict[str, Any]:
    """Return the annotations declared directly on `klass`, without evaluating failures."""
    try:
        return dict(inspect.get_annotations(klass))
    except NameError:
        # Deferred annotations (Python >= 3.14) that name undefined symbols.
        import annotationlib  # noqa: PLC0415

        return dict(annotationlib.get_annotations(klass, format=annotationlib.Format.FORWARDREF))


def _as_class(hint: Any) -> type | None:
    if hint is Any or not isinstance(hint, type) or typing.get_origin(hint) is not None:
        return None
    return hint


def _is_classvar(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.split("[", 1)[0].strip() in {"ClassVar", "typing.ClassVar"}
    return hint is ClassVar or typing.get_origin(hint) is ClassVar


def _public_properties(cls: type) -> Iterator[tuple[str, property]]:
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and not name.startswith("_"):
                yield name, attr


def _instance_attribute_names(obj: object) -> list[str]:
    names: list[str] = []
    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        names.extend(name for name in instance_dict if isinstance(name, str))
    for klass in reversed(type(obj).__mro__):
        slots = vars(klass).get("__slots__", ())
        for name in (slots,) if isinstance(slots, str) else slots:
            if name not in names and hasattr(obj, name):
                names.append(name)
    return names


# End of file: src/objprint/printing/introspection.py
