# File: src/objprint/printing/selectors.py
"""
Resolution of field selectors into FieldRef identifiers.

A selector names one field of the configuration's owner type in one of three forms:

- a callable performing plain attribute access: `lambda p: p.age`
  (nested access such as `lambda p: p.address.city` selects `city` on the
  declared type of `address`)
- a dotted attribute path string: `"age"`, `"address.city"`
- an explicit `FieldRef`, accepted as-is

Callables are evaluated once against a recording probe, never against a real
instance. Anything other than a chain of attribute reads (arithmetic, method
calls, indexing, returning the parameter itself) raises SelectorError.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeAlias

from objprint.printing.exceptions import SelectorError
from objprint.printing.field_ref import FieldRef
from objprint.printing.introspection import FieldInfo, field_named, fields_of, is_leaf_type
from objprint.xlogging.logger_factory import create_logger


__all__ = [
    "FieldSelector",
    "resolve_field",
]

_LOG = create_logger(__name__)

FieldSelector: TypeAlias = Callable[[Any], Any] | str | FieldRef


class _SelectorProbe:
    """Stand-in for an instance of `_probe_type` that records the attribute chain read from it."""

    __slots__ = ("_probe_type", "_probe_field")

    _probe_type: type | None
    _probe_field: FieldInfo | None

    def __init__(self, probe_type: type | None, probe_field: FieldInfo | None = None) -> None:
        object.__setattr__(self, "_probe_type", probe_type)
        object.__setattr__(self, "_probe_field", probe_field)

    def __getattr__(self, name: str) -> _SelectorProbe:
        if name.startswith("__"):
            raise AttributeError(name)
        info = _lookup(self._probe_type, name, via=self._probe_field)
        return _SelectorProbe(info.declared_type, info)

    def __setattr__(self, name: str, value: Any) -> None:
        raise SelectorError(f"selector must not assign attributes (tried to set {name!r})")

    def __repr__(self) -> str:
        target = self._probe_field.ref if self._probe_field else self._probe_type
        return f"<selector probe {target}>"


def resolve_field(owner: type | None, selector: FieldSelector) -> FieldRef:
    """
    Resolve `selector` against `owner` into a FieldRef.

    :param owner: The root type the selector is evaluated against.
    :param selector: A callable, a dotted attribute path, or a FieldRef.
    :return FieldRef: The identity of the selected field.
    :raises SelectorError: If the selector is not a plain field access, or `owner` is None.
    """
    if isinstance(selector, FieldRef):
        return selector
    if owner is None:
        raise SelectorError(
            f"cannot resolve field selector {selector!r} without an owner type; "
            "use PrintingConfig.for_type(Owner) or pass a FieldRef"
        )
    if isinstance(selector, str):
        ref = _resolve_path(owner, selector)
    elif callable(selector):
        ref = _resolve_callable(owner, selector)
    else:
        raise SelectorError(f"unsupported field selector: {selector!r}")
    _LOG.trace("resolved selector %r on %s to %s", selector, owner.__qualname__, str(ref))
    return ref


def _resolve_path(owner: type, path: str) -> FieldRef:
    parts = path.split(".")
    if not all(part.isidentifier() for part in parts):
        raise SelectorError(f"field path {path!r} is not a dotted attribute path")
    current_type: type | None = owner
    info: FieldInfo | None = None
    for part in parts:
        info = _lookup(current_type, part, via=info)
        current_type = info.declared_type
    assert info is not None
    return info.ref


def _resolve_callable(owner: type, selector: Callable[[Any], Any]) -> FieldRef:
    root = _SelectorProbe(owner)
    try:
        result = selector(root)
    except SelectorError:
        raise
    except (TypeError, AttributeError, KeyError, IndexError) as exc:
        raise SelectorError(
            f"selector {selector!r} is not a plain field access: {type(exc).__name__}: {exc}"
        ) from exc
    if not isinstance(result, _SelectorProbe):
        raise SelectorError(f"selector {selector!r} computes a value instead of accessing a field")
    if result._probe_field is None:
        raise SelectorError(f"selector {selector!r} returns the object itself, not one of its fields")
    return result._probe_field.ref


def _lookup(cls: type | None, name: str, *, via: FieldInfo | None) -> FieldInfo:
    """Return the descriptor for `cls.name`, validating that the access is a field read."""
    if cls is None:
        raise SelectorError(
            f"cannot select {name!r} through {via.ref if via else 'an untyped value'}: "
            "its declared type is unknown (annotate the field with a class)"
        )
    if name.startswith("_"):
        raise SelectorError(f"{cls.__qualname__}.{name} is private and is never rendered")
    if is_leaf_type(cls):
        raise SelectorError(f"{cls.__qualname__} is rendered as a leaf and has no fields ({name!r})")
    info = field_named(cls, name)
    if info is not None:
        return info
    if any(known.kind == "field" for known in fields_of(cls)):
        raise SelectorError(f"{cls.__qualname__} has no field named {name!r}")
    if _is_behavior(inspect.getattr_static(cls, name, None)):
        raise SelectorError(f"{cls.__qualname__}.{name} is a method, not a field")
    # Undeclared classes only reveal their attributes on instances.
    _LOG.warning(
        "Selector %s.%s names no declared field; assuming an instance attribute",
        cls.__qualname__,
        name,
    )
    return FieldInfo(FieldRef(cls, name), None, "attribute")


def _is_behavior(attr: Any) -> bool:
    """True for functions, classmethods, staticmethods and other non-data descriptors."""
    if attr is None:
        return False
    if isinstance(attr, (classmethod, staticmethod)):
        return True
    attr_type = type(attr)
    return hasattr(attr_type, "__get__") and not hasattr(attr_type, "__set__")


# End of file: src/objprint/printing/selectors.py
