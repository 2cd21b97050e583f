"""Tests for the one-call entry points."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from objprint.printing import ObjectPrinter, PrintingConfig, print_to_string, print_to_string_with


@dataclass
class Person:
    name: str
    age: int


@pytest.mark.unit
def test_object_printer_is_a_namespace() -> None:
    with pytest.raises(TypeError, match="namespace"):
        ObjectPrinter()


@pytest.mark.unit
def test_for_type_returns_empty_config_for_owner() -> None:
    config = ObjectPrinter.for_type(Person)
    assert isinstance(config, PrintingConfig)
    assert config.owner is Person
    assert config == PrintingConfig()


@pytest.mark.unit
def test_print_to_string_defaults_to_empty_config() -> None:
    assert print_to_string(Person("Ann", 30)) == "Person\n\tname = Ann\n\tage = 30\n"
    assert print_to_string(None) == "None\n"


@pytest.mark.unit
def test_print_to_string_uses_given_config() -> None:
    config = ObjectPrinter.for_type(Person).serialize(int).using(lambda _: "<int>")
    assert print_to_string(Person("Ann", 30), config) == "Person\n\tname = Ann\n\tage = <int>\n"


@pytest.mark.unit
def test_print_to_string_with_builds_config_for_object_type() -> None:
    text = print_to_string_with(Person("Ann", 30), lambda c: c.excluding(lambda p: p.age))
    assert text == "Person\n\tname = Ann\n"
