# File: src/objprint/printing/test_selectors.py
"""Tests for resolving field selectors into FieldRefs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest

from objprint.printing.exceptions import SelectorError
from objprint.printing.field_ref import FieldRef
from objprint.printing.selectors import resolve_field


@dataclass
class Address:
    city: str


@dataclass
class Person:
    name: str
    age: int
    address: Address
    nickname: str | None = None
    _secret: str = ""

    def greeting(self) -> str:
        return f"hi {self.name}"


@dataclass
class Employee(Person):
    company: str = ""


class Rectangle:
    def __init__(self, width: int) -> None:
        self.width = width

    @property
    def double(self) -> int:
        return self.width * 2

    def scale(self, factor: int) -> Rectangle:
        return Rectangle(self.width * factor)

    @classmethod
    def square(cls, side: int) -> Rectangle:
        return cls(side)

    @staticmethod
    def unit() -> Rectangle:
        return Rectangle(1)


@pytest.mark.unit
class TestAcceptedSelectors:
    def test_lambda_attribute_access(self) -> None:
        assert resolve_field(Person, lambda p: p.age) == FieldRef(Person, "age")

    def test_dotted_string(self) -> None:
        assert resolve_field(Person, "age") == FieldRef(Person, "age")
        assert resolve_field(Person, "address.city") == FieldRef(Address, "city")

    def test_nested_lambda_selects_field_on_declared_type(self) -> None:
        assert resolve_field(Person, lambda p: p.address.city) == FieldRef(Address, "city")

    def test_field_ref_passes_through_even_without_owner(self) -> None:
        ref = FieldRef(Person, "name")
        assert resolve_field(None, ref) is ref

    def test_inherited_field_keeps_declaring_owner(self) -> None:
        assert resolve_field(Employee, lambda e: e.name) == FieldRef(Person, "name")
        assert resolve_field(Employee, lambda e: e.company) == FieldRef(Employee, "company")

    def test_undeclared_class_accepts_instance_attributes(self) -> None:
        assert resolve_field(Rectangle, lambda r: r.width) == FieldRef(Rectangle, "width")
        assert resolve_field(Rectangle, "double") == FieldRef(Rectangle, "double")

    def test_undeclared_attribute_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="objprint.printing.selectors"):
            assert resolve_field(Rectangle, lambda r: r.widht) == FieldRef(Rectangle, "widht")
        assert any("Rectangle.widht" in r.getMessage() for r in caplog.records if r.levelno == logging.WARNING)

    def test_named_function_selector(self) -> None:
        def select_name(person: Person) -> str:
            return person.name

        assert resolve_field(Person, select_name) == FieldRef(Person, "name")


@pytest.mark.unit
class TestRejectedSelectors:
    @pytest.mark.parametrize(
        "selector",
        [
            lambda p: p.age + 1,
            lambda p: p,
            lambda p: p.name.upper(),
            lambda p: p.greeting(),
            lambda p: len(p),
            lambda p: p.address[0],
            lambda p: 42,
            lambda p: p.nickname.real,
            lambda p: p._secret,
            lambda p: p.missing,
        ],
        ids=[
            "arithmetic",
            "identity",
            "method-on-leaf",
            "method-call",
            "builtin-call",
            "indexing",
            "constant",
            "through-optional",
            "private",
            "unknown",
        ],
    )
    def test_not_a_plain_field_access(self, selector: Callable[[Any], Any]) -> None:
        with pytest.raises(SelectorError):
            resolve_field(Person, selector)

    @pytest.mark.parametrize(
        "selector",
        [
            lambda r: r.scale,
            lambda r: r.scale(2),
            lambda r: r.square,
            lambda r: r.unit,
            "scale",
        ],
        ids=["method", "method-call", "classmethod", "staticmethod", "method-path"],
    )
    def test_methods_of_undeclared_class_are_not_fields(self, selector: Any) -> None:
        with pytest.raises(SelectorError, match="method"):
            resolve_field(Rectangle, selector)

    @pytest.mark.parametrize("path", ["", "age.", "1age", "age + 1", "address.zip"])
    def test_bad_dotted_paths(self, path: str) -> None:
        with pytest.raises(SelectorError):
            resolve_field(Person, path)

    def test_missing_owner(self) -> None:
        with pytest.raises(SelectorError, match="owner"):
            resolve_field(None, lambda p: p.age)

    def test_selector_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve_field(Person, lambda p: p.age * 2)

    def test_assignment_is_rejected(self) -> None:
        def assign(p: Any) -> Any:
            p.age = 3
            return p.age

        with pytest.raises(SelectorError, match="assign"):
            resolve_field(Person, assign)


# End of file: src/objprint/printing/test_selectors.py
