# File: src/objprint/printing/renderer.py
"""
Recursive text rendering of an object graph under a PrintingConfig.

Every value, at every depth, is resolved by the same precedence:

1. `None` renders as the null literal.
2. A value whose exact runtime type is excluded renders as "".
3. A value whose exact runtime type has a serialization chain renders through it.
4. A leaf (numbers, text, dates, enums, ...) renders with str().
5. Anything else renders structurally: its type name, then one
   `<indent>name = <value>` line per field, recursing one level deeper.

Inside structural rendering a field is skipped when its declared type, its
value's runtime type, or the field itself is excluded. A field's own chain
wins over recursion (and over any type chain of its value).

Cycles are not detected; a self-referencing graph recurses until RecursionError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from objprint.base.constants import INDENT, KV_SEPARATOR, LINE_TERMINATOR, NULL_LITERAL
from objprint.printing.field_ref import FieldRef
from objprint.printing.introspection import FieldInfo, instance_fields, is_leaf, read_field
from objprint.printing.serialization_chain import SerializationChain
from objprint.xlogging.logger_factory import create_logger


if TYPE_CHECKING:
    from objprint.printing.printing_config import PrintingConfig


__all__ = [
    "Renderer",
]

_LOG = create_logger(__name__)

_MISSING = object()


class Renderer:
    """Stateless walker that renders values with the rules of one PrintingConfig."""

    __slots__ = ("_config",)

    def __init__(self, config: PrintingConfig) -> None:
        self._config = config

    @property
    def config(self) -> PrintingConfig:
        return self._config

    def render(self, value: Any, depth: int = 0) -> str:
        """
        Render `value` at nesting level `depth`.

        :param value: Any object, including None.
        :param depth: Nesting level; fields of this value are indented `depth + 1` times.
        :return str: The rendered text, newline-terminated, or "" for an excluded value.
        """
        if value is None:
            return NULL_LITERAL + LINE_TERMINATOR

        value_type = type(value)
        if value_type in self._config.excluded_types:
            return ""

        chain = self._config.type_serializers.get(value_type)
        if chain is not None:
            return self._apply(chain, value, value_type.__qualname__)

        if is_leaf(value):
            return str(value) + LINE_TERMINATOR

        return self._render_structure(value, depth)

    def _render_structure(self, value: Any, depth: int) -> str:
        config = self._config
        indent = INDENT * (depth + 1)
        fields = instance_fields(value)
        _LOG.trace(
            "render %s at depth %d (%d fields)", type(value).__qualname__, depth, len(fields)
        )

        parts: list[str] = [type(value).__name__ + LINE_TERMINATOR]
        for info in fields:
            if info.declared_type is not None and info.declared_type in config.excluded_types:
                continue
            refs = _rule_refs(value, info)
            if any(ref in config.excluded_fields for ref in refs):
                continue

            field_value = self._read(value, info)
            if field_value is _MISSING:
                continue
            if field_value is not None and type(field_value) in config.excluded_types:
                continue

            chain = next(
                (config.field_serializers[ref] for ref in refs if ref in config.field_serializers),
                None,
            )
            if chain is not None:
                rendered = self._apply(chain, field_value, str(info.ref))
            else:
                rendered = self.render(field_value, depth + 1)
            parts.append(indent + info.name + KV_SEPARATOR + rendered)
        return "".join(parts)

    @staticmethod
    def _read(obj: Any, info: FieldInfo) -> Any:
        """Read a field, returning _MISSING for a declared data field that was never assigned."""
        if info.kind == "field" and not hasattr(obj, info.name):
            _LOG.warning("Skipping uninitialized field %s", str(info.ref))
            return _MISSING
        return read_field(obj, info)

    @staticmethod
    def _apply(chain: SerializationChain, value: Any, where: str) -> str:
        try:
            return chain.apply(value)
        except Exception as exc:
            _LOG.debug(
                "Serialization rule for %s failed on %s: %s: %s",
                where,
                type(value).__qualname__,
                type(exc).__name__,
                exc,
            )
            raise


def _rule_refs(obj: Any, info: FieldInfo) -> tuple[FieldRef, ...]:
    """
    Return the FieldRefs a field rule may be keyed by, most specific first.

    An undeclared instance attribute has no declaring class, so a rule on any
    class in the MRO of the instance applies to it.
    """
    if info.kind != "attribute":
        return (info.ref,)
    return tuple(FieldRef(klass, info.name) for klass in type(obj).__mro__ if klass is not object)


# End of file: src/objprint/printing/renderer.py
