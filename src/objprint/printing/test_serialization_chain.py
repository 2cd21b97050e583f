"""Tests for SerializationChain composition."""

from __future__ import annotations

import pytest

from objprint.printing.exceptions import ObjectPrintingError, SerializationChainError
from objprint.printing.serialization_chain import SerializationChain


@pytest.mark.unit
def test_steps_compose_in_insertion_order() -> None:
    chain = SerializationChain.of(lambda v: f"f({v})").then(lambda s: f"g({s})")
    assert chain.compose(1) == "g(f(1))"
    assert chain.apply(1) == "g(f(1))\n"


@pytest.mark.unit
def test_then_leaves_original_chain_unchanged() -> None:
    one = SerializationChain.of(str)
    two = one.then(str.upper)
    assert len(one) == 1
    assert len(two) == 2
    assert two.steps[0] is str


@pytest.mark.unit
def test_non_string_results_are_coerced() -> None:
    chain = SerializationChain.of(lambda v: v * 2).then(len)
    assert chain.compose(21) == "2"


@pytest.mark.unit
def test_first_step_receives_raw_value() -> None:
    seen: list[object] = []
    value = object()
    SerializationChain.of(lambda v: seen.append(v) or "x").apply(value)
    assert seen == [value]


@pytest.mark.unit
def test_empty_chain_is_rejected() -> None:
    with pytest.raises(SerializationChainError, match="at least one step"):
        SerializationChain(())


@pytest.mark.unit
def test_non_callable_step_is_rejected() -> None:
    with pytest.raises(SerializationChainError, match="not callable"):
        SerializationChain.of("upper")  # type: ignore[arg-type]
    assert issubclass(SerializationChainError, ValueError)
    assert issubclass(SerializationChainError, ObjectPrintingError)


@pytest.mark.unit
def test_step_exception_propagates() -> None:
    chain = SerializationChain.of(str).then(lambda s: int(s))
    with pytest.raises(ValueError):
        chain.apply("abc")
