"""
package: objprint.printing

Configurable text dumps of object graphs.

Example:
    >>> from objprint.printing import PrintingConfig
    >>> config = PrintingConfig.for_type(Person).excluding(lambda p: p.age)
    >>> config.print_to_string(Person(name="Ann", age=30))
    'Person\\n\\tname = Ann\\n'
"""

# <AUTOGEN_INIT>
from objprint.printing import (
    exceptions,
    field_ref,
    introspection,
    object_printer,
    printing_config,
    renderer,
    rule_builder,
    selectors,
    serialization_chain,
)


__all__ = [
    "exceptions",
    "field_ref",
    "introspection",
    "object_printer",
    "printing_config",
    "renderer",
    "rule_builder",
    "selectors",
    "serialization_chain",
]
# </AUTOGEN_INIT>

from objprint.printing.exceptions import ObjectPrintingError, SelectorError, SerializationChainError
from objprint.printing.field_ref import FieldRef
from objprint.printing.object_printer import ObjectPrinter, print_to_string, print_to_string_with
from objprint.printing.printing_config import PrintingConfig
from objprint.printing.rule_builder import SerializationRuleBuilder
from objprint.printing.serialization_chain import SerializationChain


__all__ += [
    "FieldRef",
    "ObjectPrinter",
    "ObjectPrintingError",
    "PrintingConfig",
    "SelectorError",
    "SerializationChain",
    "SerializationChainError",
    "SerializationRuleBuilder",
    "print_to_string",
    "print_to_string_with",
]
