"""Equality and ordering of two objects through caller-supplied selectors.

Each helper projects its subjects through the given selectors and delegates to
the native ``==``, ``<`` and ``>`` of the projected values. Selectors are
validated before any of them runs and each one is invoked exactly once.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import numpy as np

from .errors import require_callable

A = TypeVar("A")
B = TypeVar("B")


def _equal(left: Any, right: Any) -> bool:
    # ndarray == ndarray is element-wise; collapse it to a single answer.
    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return bool(np.array_equal(left, right))
    return bool(left == right)


def _compare(left: Any, right: Any) -> int:
    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        raise TypeError("numpy arrays have no total order; select a scalar or tuple key instead")
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def is_equal(
    a: A,
    b: B,
    selector_a: Callable[[A], Any],
    selector_b: Callable[[B], Any],
) -> bool:
    """Return ``True`` when ``selector_a(a)`` equals ``selector_b(b)``."""

    require_callable(selector_a, "selector_a")
    require_callable(selector_b, "selector_b")
    return _equal(selector_a(a), selector_b(b))


def is_equal_to_value(
    a: A,
    selector_a: Callable[[A], Any],
    value_producer: Callable[[], Any],
) -> bool:
    """Return ``True`` when ``selector_a(a)`` equals the value produced by ``value_producer()``."""

    require_callable(selector_a, "selector_a")
    require_callable(value_producer, "value_producer")
    return _equal(selector_a(a), value_producer())


def compare_selected(
    a: A,
    b: B,
    selector_a: Callable[[A], Any],
    selector_b: Callable[[B], Any],
) -> int:
    """Order ``a`` against ``b`` by their projected values.

    Returns
    -------
    int
        ``-1`` if ``selector_a(a)`` sorts before ``selector_b(b)``, ``1`` if it
        sorts after and ``0`` otherwise. Values that are neither smaller nor
        larger (including unordered pairs such as NaN) compare as ``0``.
    """

    require_callable(selector_a, "selector_a")
    require_callable(selector_b, "selector_b")
    return _compare(selector_a(a), selector_b(b))


def compare_selected_to_value(
    a: A,
    selector_a: Callable[[A], Any],
    value_producer: Callable[[], Any],
) -> int:
    """Order the projection of ``a`` against ``value_producer()``; see :func:`compare_selected`."""

    require_callable(selector_a, "selector_a")
    require_callable(value_producer, "value_producer")
    return _compare(selector_a(a), value_producer())


__all__ = [
    "is_equal",
    "is_equal_to_value",
    "compare_selected",
    "compare_selected_to_value",
]
