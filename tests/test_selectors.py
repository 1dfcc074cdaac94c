"""Tests for selector-based equality and ordering."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import pytest

from fextension.errors import InvalidArgumentError
from fextension.selectors import (
    compare_selected,
    compare_selected_to_value,
    is_equal,
    is_equal_to_value,
)


@dataclass
class Person:
    name: str
    age: int


@dataclass
class Pet:
    owner: str
    years: int


def test_is_equal_projects_both_sides() -> None:
    alice = Person("alice", 30)
    rex = Pet("alice", 4)

    assert is_equal(alice, rex, lambda p: p.name, lambda p: p.owner)
    assert not is_equal(alice, rex, lambda p: p.age, lambda p: p.years)


@pytest.mark.parametrize("a, b", [(1, 1), (1, 2), ("x", "x"), (None, None), (None, 0)])
def test_is_equal_matches_native_equality(a, b) -> None:
    f = lambda v: v  # noqa: E731
    g = lambda v: v  # noqa: E731
    assert is_equal(a, b, f, g) == (f(a) == g(b))


def test_is_equal_to_value_uses_producer() -> None:
    alice = Person("alice", 30)

    assert is_equal_to_value(alice, lambda p: p.age, lambda: 30)
    assert not is_equal_to_value(alice, lambda p: p.age, lambda: 31)


def test_is_equal_handles_numpy_arrays() -> None:
    left = {"v": np.array([1.0, 2.0, 3.0])}
    right = {"v": np.array([1.0, 2.0, 3.0])}

    assert is_equal(left, right, lambda d: d["v"], lambda d: d["v"])
    assert not is_equal_to_value(left, lambda d: d["v"], lambda: np.array([1.0, 2.0]))


def test_selectors_invoked_exactly_once() -> None:
    calls = []

    def sel_a(v):
        calls.append("a")
        return v

    def sel_b(v):
        calls.append("b")
        return v

    compare_selected(1, 2, sel_a, sel_b)
    is_equal(1, 2, sel_a, sel_b)
    assert calls == ["a", "b", "a", "b"]


@pytest.mark.parametrize(
    "a, b, expected",
    [(1, 2, -1), (2, 2, 0), (3, 2, 1), ("apple", "banana", -1), (2.5, 1, 1)],
)
def test_compare_selected_sign(a, b, expected) -> None:
    assert compare_selected(a, b, lambda v: v, lambda v: v) == expected


def test_compare_selected_across_types() -> None:
    alice = Person("alice", 30)
    rex = Pet("bob", 4)

    assert compare_selected(alice, rex, lambda p: p.age, lambda p: p.years) == 1
    assert compare_selected(alice, rex, lambda p: p.name, lambda p: p.owner) == -1


def test_compare_selected_to_value() -> None:
    alice = Person("alice", 30)

    assert compare_selected_to_value(alice, lambda p: p.age, lambda: 40) == -1
    assert compare_selected_to_value(alice, lambda p: p.age, lambda: 30) == 0
    assert compare_selected_to_value(alice, lambda p: p.age, lambda: 20) == 1


def test_compare_unordered_values_is_zero() -> None:
    assert compare_selected(math.nan, 1.0, lambda v: v, lambda v: v) == 0


def test_compare_unorderable_values_raise_type_error() -> None:
    with pytest.raises(TypeError):
        compare_selected(1, "a", lambda v: v, lambda v: v)


def test_compare_array_keys_raise_type_error() -> None:
    ident = lambda v: v  # noqa: E731

    with pytest.raises(TypeError, match="numpy"):
        compare_selected(np.array([1, 2]), np.array([1, 3]), ident, ident)
    with pytest.raises(TypeError, match="numpy"):
        compare_selected_to_value(np.array([1, 2]), ident, lambda: 1)
    with pytest.raises(TypeError, match="numpy"):
        compare_selected(1, np.array([2]), ident, ident)


def test_producer_paths_invoke_each_callable_once() -> None:
    calls = []

    def sel(v):
        calls.append("selector")
        return v

    def produce():
        calls.append("producer")
        return 2

    assert not is_equal_to_value(1, sel, produce)
    assert compare_selected_to_value(1, sel, produce) == -1
    assert calls == ["selector", "producer", "selector", "producer"]


def test_missing_selectors_raise() -> None:
    ident = lambda v: v  # noqa: E731

    with pytest.raises(InvalidArgumentError, match="selector_a"):
        is_equal(1, 1, None, ident)
    with pytest.raises(InvalidArgumentError, match="selector_b"):
        is_equal(1, 1, ident, None)
    with pytest.raises(InvalidArgumentError, match="selector_a"):
        is_equal_to_value(1, None, lambda: 1)
    with pytest.raises(InvalidArgumentError, match="value_producer"):
        is_equal_to_value(1, ident, None)
    with pytest.raises(InvalidArgumentError, match="selector_a"):
        compare_selected(1, 1, None, ident)
    with pytest.raises(InvalidArgumentError, match="selector_b"):
        compare_selected(1, 1, ident, None)
    with pytest.raises(InvalidArgumentError, match="value_producer"):
        compare_selected_to_value(1, ident, None)


def test_validation_happens_before_any_selector_runs() -> None:
    calls = []

    def sel(v):
        calls.append(v)
        return v

    with pytest.raises(InvalidArgumentError):
        is_equal(1, 2, sel, None)
    assert calls == []


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        compare_selected_to_value(1, None, lambda: 1)


@pytest.mark.parametrize(
    "call",
    [
        lambda: is_equal(1, 1, 3, lambda v: v),
        lambda: is_equal(1, 1, lambda v: v, "b"),
        lambda: is_equal_to_value(1, lambda v: v, 1),
        lambda: compare_selected(1, 1, lambda v: v, 2),
        lambda: compare_selected_to_value(1, "a", lambda: 1),
    ],
)
def test_non_callable_selectors_raise(call) -> None:
    with pytest.raises(InvalidArgumentError, match="must be callable"):
        call()
