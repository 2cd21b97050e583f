# File: src/objprint/printing/printing_config.py
"""
PrintingConfig: the immutable, fluent configuration of an object dump.

Example:
    >>> config = (
    ...     PrintingConfig.for_type(Person)
    ...     .excluding(Guid)
    ...     .excluding(lambda p: p.password)
    ...     .serialize(float).using_format(".2f")
    ...     .serialize(lambda p: p.name).trimmed_to_length(10)
    ... )
    >>> print(config.print_to_string(person))

Every method returns a new PrintingConfig. The receiver is never altered, so a
configuration can serve as the shared base of several divergent extensions.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar, final, overload

from objprint.printing.field_ref import FieldRef
from objprint.printing.renderer import Renderer
from objprint.printing.rule_builder import SerializationRuleBuilder
from objprint.printing.selectors import FieldSelector, resolve_field
from objprint.printing.serialization_chain import SerializationChain, SerializationStep
from objprint.xlogging.logger_constants import TRACE
from objprint.xlogging.logger_factory import create_logger


__all__ = [
    "PrintingConfig",
]

_LOG = create_logger(__name__)

T = TypeVar("T")


@final
class PrintingConfig:
    """
    Immutable snapshot of exclusion and serialization rules.

    - `excluded_types`: runtime or declared types never rendered anywhere in the graph.
    - `excluded_fields`: specific fields (owner + name) skipped regardless of their type.
    - `type_serializers`: chains applied to any value of exactly that runtime type.
    - `field_serializers`: chains applied only when rendering that declared field.
    """

    __slots__ = (
        "_owner",
        "_excluded_types",
        "_excluded_fields",
        "_type_serializers",
        "_field_serializers",
    )

    _owner: type | None
    _excluded_types: frozenset[type]
    _excluded_fields: frozenset[FieldRef]
    _type_serializers: dict[type, SerializationChain]
    _field_serializers: dict[FieldRef, SerializationChain]

    def __init__(self, owner: type | None = None) -> None:
        """
        Create an empty configuration.

        :param owner: The root type that field selectors are evaluated against.
            Without an owner, fields can only be named with explicit FieldRefs.
        """
        self._owner = owner
        self._excluded_types = frozenset()
        self._excluded_fields = frozenset()
        self._type_serializers = {}
        self._field_serializers = {}

    @classmethod
    def for_type(cls, owner: type) -> PrintingConfig:
        """Create an empty configuration whose field selectors target `owner`."""
        return cls(owner)

    # -- read-only views ---------------------------------------------------

    @property
    def owner(self) -> type | None:
        return self._owner

    @property
    def excluded_types(self) -> frozenset[type]:
        return self._excluded_types

    @property
    def excluded_fields(self) -> frozenset[FieldRef]:
        return self._excluded_fields

    @property
    def type_serializers(self) -> Mapping[type, SerializationChain]:
        return MappingProxyType(self._type_serializers)

    @property
    def field_serializers(self) -> Mapping[FieldRef, SerializationChain]:
        return MappingProxyType(self._field_serializers)

    # -- fluent builder ----------------------------------------------------

    @overload
    def excluding(self, target: type) -> PrintingConfig: ...
    @overload
    def excluding(self, target: FieldSelector) -> PrintingConfig: ...
    def excluding(self, target: Any) -> PrintingConfig:
        """
        Exclude a type everywhere in the graph, or one field of the owner type.

        :param target: A type, or a field selector (callable, dotted path or FieldRef).
        :raises SelectorError: If a selector is not a plain field access.
        """
        if isinstance(target, type):
            return self._fork(excluded_types=self._excluded_types | {target})
        ref = resolve_field(self._owner, target)
        return self._fork(excluded_fields=self._excluded_fields | {ref})

    @overload
    def serialize(self, target: type[T]) -> SerializationRuleBuilder[T]: ...
    @overload
    def serialize(self, target: FieldSelector) -> SerializationRuleBuilder[Any]: ...
    def serialize(self, target: Any) -> SerializationRuleBuilder[Any]:
        """
        Start a serialization rule for a type or for one field of the owner type.

        The returned builder's terminal methods (`using`, `using_format`,
        `trimmed_to_length`) return the extended PrintingConfig.

        :raises SelectorError: If a selector is not a plain field access.
        """
        if isinstance(target, type):
            return SerializationRuleBuilder(self, target)
        return SerializationRuleBuilder(self, resolve_field(self._owner, target))

    def with_type_rule(self, target: type, step: SerializationStep) -> PrintingConfig:
        """Append `step` to the chain for values of exactly type `target`."""
        type_serializers = dict(self._type_serializers)
        type_serializers[target] = _extended(type_serializers.get(target), step)
        return self._fork(type_serializers=type_serializers)

    def with_field_rule(self, target: FieldSelector, step: SerializationStep) -> PrintingConfig:
        """Append `step` to the chain for one field (selector resolved against the owner type)."""
        ref = resolve_field(self._owner, target)
        field_serializers = dict(self._field_serializers)
        field_serializers[ref] = _extended(field_serializers.get(ref), step)
        return self._fork(field_serializers=field_serializers)

    def resolve_field(self, selector: FieldSelector) -> FieldRef:
        """Resolve a field selector against this configuration's owner type."""
        return resolve_field(self._owner, selector)

    # -- rendering ---------------------------------------------------------

    def print_to_string(self, obj: Any) -> str:
        """Render `obj` with the accumulated rules, starting at nesting level 0."""
        return Renderer(self).render(obj, 0)

    # -- value semantics ---------------------------------------------------

    def _fork(
        self,
        *,
        excluded_types: frozenset[type] | None = None,
        excluded_fields: frozenset[FieldRef] | None = None,
        type_serializers: dict[type, SerializationChain] | None = None,
        field_serializers: dict[FieldRef, SerializationChain] | None = None,
    ) -> PrintingConfig:
        """Return a copy of this configuration with the given collections replaced."""
        clone = PrintingConfig(self._owner)
        clone._excluded_types = frozenset(
            self._excluded_types if excluded_types is None else excluded_types
        )
        clone._excluded_fields = frozenset(
            self._excluded_fields if excluded_fields is None else excluded_fields
        )
        clone._type_serializers = dict(
            self._type_serializers if type_serializers is None else type_serializers
        )
        clone._field_serializers = dict(
            self._field_serializers if field_serializers is None else field_serializers
        )
        if _LOG.isEnabledFor(TRACE):
            _LOG.trace("fork %s", repr(clone))
        return clone

    def _key(self) -> tuple[Any, ...]:
        return (
            self._excluded_types,
            self._excluded_fields,
            frozenset(self._type_serializers.items()),
            frozenset(self._field_serializers.items()),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrintingConfig):
            return NotImplemented
        return (
            self._excluded_types == other._excluded_types
            and self._excluded_fields == other._excluded_fields
            and self._type_serializers == other._type_serializers
            and self._field_serializers == other._field_serializers
        )

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        def _names(items: Any) -> str:
            return "[" + ", ".join(sorted(getattr(i, "__qualname__", str(i)) for i in items)) + "]"

        owner = self._owner.__qualname__ if self._owner else None
        return (
            f"PrintingConfig(owner={owner}, "
            f"excluded_types={_names(self._excluded_types)}, "
            f"excluded_fields={_names(self._excluded_fields)}, "
            f"type_serializers={_names(self._type_serializers)}, "
            f"field_serializers={_names(self._field_serializers)})"
        )


def _extended(chain: SerializationChain | None, step: SerializationStep) -> SerializationChain:
    return SerializationChain.of(step) if chain is None else chain.then(step)


# End of file: src/objprint/printing/printing_config.py
