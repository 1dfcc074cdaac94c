"""Orderable wrapper pairing a value with a comparison-key selector."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar

from .errors import require, require_callable
from .selectors import compare_selected

T = TypeVar("T")


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Comparable(Generic[T]):
    """Wrap ``obj`` so that it orders by ``selector(obj)``."""

    obj: T
    selector: Callable[[T], Any]

    def __post_init__(self) -> None:
        require_callable(self.selector, "selector")

    def compare_to(self, other: "Comparable[T]") -> int:
        return compare_selected(self.obj, other.obj, self.selector, other.selector)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return self.compare_to(other) < 0

    __hash__ = None  # type: ignore[assignment]


def as_comparables(source: Iterable[T], selector: Callable[[T], Any]) -> Iterator[Comparable[T]]:
    """Lazily wrap every element of ``source`` with the shared ``selector``."""

    require(source, "source")
    require_callable(selector, "selector")
    return (Comparable(item, selector) for item in source)


def sort_by(source: Iterable[T], selector: Callable[[T], Any], reverse: bool = False) -> List[T]:
    """Return the elements of ``source`` sorted by ``selector`` (stable)."""

    wrapped = sorted(as_comparables(source, selector), reverse=reverse)
    return [item.obj for item in wrapped]


__all__ = ["Comparable", "as_comparables", "sort_by"]
