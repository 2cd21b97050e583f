# File: src/objprint/printing/test_introspection.py
"""
Tests for field enumeration.

Covers:
- Dataclass and annotated-class field order, including inheritance
- ClassVar and private names are skipped
- Properties come after data fields
- Undeclared instance attributes on plain and slotted classes
- Declared-type resolution for unions and unresolvable annotations
- Leaf classification
"""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from fractions import Fraction
from pathlib import Path
from typing import Any, ClassVar

import pytest

from objprint.printing.field_ref import FieldRef
from objprint.printing.introspection import (
    field_named,
    fields_of,
    instance_fields,
    is_leaf,
    is_leaf_type,
    read_field,
)


@dataclass
class Point:
    x: int
    y: int

    @property
    def norm1(self) -> int:
        return abs(self.x) + abs(self.y)


@dataclass
class Point3(Point):
    z: int = 0


class Annotated:
    label: str
    count: int
    registry: ClassVar[dict[str, int]] = {}
    _hidden: int

    def __init__(self) -> None:
        self.label = "a"
        self.count = 1
        self._hidden = 2
        self.extra = True


class Slotted:
    __slots__ = ("left", "right", "_cache")

    def __init__(self) -> None:
        self.left = 1
        self.right = 2


@dataclass
class Loose:
    maybe: int | None
    anything: Any
    items: list[int]


@dataclass
class Forward:
    known: int
    unknown: UndefinedName  # noqa: F821  # type: ignore[name-defined]  # pyright: ignore[reportUndefinedVariable]


class Shade(enum.Enum):
    DARK = 1


def _names(infos: tuple[Any, ...]) -> list[str]:
    return [info.name for info in infos]


@pytest.mark.unit
class TestFieldsOf:
    def test_dataclass_fields_then_properties(self) -> None:
        infos = fields_of(Point)
        assert _names(infos) == ["x", "y", "norm1"]
        assert [info.kind for info in infos] == ["field", "field", "property"]
        assert infos[0].declared_type is int
        assert infos[2].declared_type is int

    def test_inherited_fields_keep_declaring_owner(self) -> None:
        infos = fields_of(Point3)
        assert _names(infos) == ["x", "y", "z", "norm1"]
        assert infos[0].ref == FieldRef(Point, "x")
        assert infos[2].ref == FieldRef(Point3, "z")
        assert infos[3].ref == FieldRef(Point, "norm1")

    def test_annotated_class_skips_classvar_and_private(self) -> None:
        assert _names(fields_of(Annotated)) == ["label", "count"]

    def test_declared_type_is_none_when_not_a_plain_class(self) -> None:
        infos = {info.name: info for info in fields_of(Loose)}
        assert infos["maybe"].declared_type is None
        assert infos["anything"].declared_type is None
        assert infos["items"].declared_type is None

    def test_unresolvable_annotations_leave_declared_type_unknown(self) -> None:
        assert _names(fields_of(Forward)) == ["known", "unknown"]
        assert all(info.declared_type is None for info in fields_of(Forward))

    def test_leaf_types_have_no_fields(self) -> None:
        assert fields_of(int) == ()
        assert fields_of(datetime) == ()

    def test_field_named(self) -> None:
        info = field_named(Point3, "y")
        assert info is not None
        assert info.ref == FieldRef(Point, "y")
        assert field_named(Point3, "w") is None


@pytest.mark.unit
class TestInstanceFields:
    def test_undeclared_attributes_follow_declared_fields(self) -> None:
        obj = Annotated()
        infos = instance_fields(obj)
        assert _names(infos) == ["label", "count", "extra"]
        assert infos[2].ref == FieldRef(Annotated, "extra")
        assert infos[2].kind == "attribute"

    def test_slots_are_enumerated_when_set(self) -> None:
        assert _names(instance_fields(Slotted())) == ["left", "right"]

    def test_read_field(self) -> None:
        point = Point(3, -4)
        infos = {info.name: info for info in instance_fields(point)}
        assert read_field(point, infos["y"]) == -4
        assert read_field(point, infos["norm1"]) == 7


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    [
        1,
        True,
        1.5,
        2j,
        Decimal("1"),
        Fraction(1, 3),
        "s",
        b"b",
        datetime(2024, 1, 2),
        date(2024, 1, 2),
        timedelta(seconds=5),
        uuid.UUID(int=0),
        Path("/tmp"),
        Shade.DARK,
        int,
        len,
    ],
)
def test_leaf_values(value: object) -> None:
    assert is_leaf(value)


@pytest.mark.unit
def test_structured_values_are_not_leaves() -> None:
    assert not is_leaf(Point(1, 2))
    assert not is_leaf([1])
    assert not is_leaf_type(Point)


@pytest.mark.unit
def test_field_cache_is_bounded() -> None:
    fields_of(Point)
    info = fields_of.cache_info()
    assert info.maxsize is not None
    assert 0 < info.currsize <= info.maxsize


# End of file: src/objprint/printing/test_introspection.py
