"""Lightweight functional helpers for walking sequences with callbacks."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, TypeVar

from .errors import InvalidArgumentError, require, require_callable

S = TypeVar("S", bound=Iterable[Any])

logger = logging.getLogger(__name__)

IndexStep = Callable[[int], int]


def increment(index: int) -> int:
    """Default stepping function: advance the index by one."""

    return index + 1


def stride(width: int) -> IndexStep:
    """Stepping function advancing the index by ``width``; ``stride(1)`` is :func:`increment`."""

    if width == 1:
        return increment

    def _step(index: int) -> int:
        return index + width

    return _step


def _resolve_step(index_step: Optional[IndexStep]) -> IndexStep:
    if index_step is None:
        return increment
    return require_callable(index_step, "index_step")


def for_each(source: S, action: Callable[[Any], Any]) -> S:
    """Call ``action`` on each element of ``source`` and return ``source``."""

    require(source, "source")
    require_callable(action, "action")
    for item in source:
        action(item)
    return source


def for_each_indexed(
    source: S,
    action: Callable[[Any, int], Any],
    start_index: int = 0,
    index_step: Optional[IndexStep] = None,
) -> S:
    """Call ``action(item, index)`` for every element of ``source``.

    ``index`` begins at ``start_index`` and is replaced by ``index_step(index)``
    after each call; the default step adds one. ``source`` is returned so calls
    can be chained.
    """

    require(source, "source")
    require_callable(action, "action")
    step = _resolve_step(index_step)

    index = start_index
    for item in source:
        action(item, index)
        index = step(index)
    return source


def for_indexed(
    source: S,
    action: Callable[[Any, int], Any],
    start_index: int = 0,
    index_step: Optional[IndexStep] = None,
) -> S:
    """Call ``action(item, index)`` only at the positions produced by stepping.

    The whole of ``source`` is walked with a zero-based position. Whenever the
    position equals the current target index the callback fires and the target
    moves on to ``index_step(target)``. With the defaults every element is
    visited; ``start_index=1, index_step=lambda i: i + 2`` visits the odd
    positions.
    """

    require(source, "source")
    require_callable(action, "action")
    step = _resolve_step(index_step)
    if start_index < 0:
        raise InvalidArgumentError(f"start_index must be non-negative, got {start_index}")

    target = start_index
    skipped = 0
    for position, item in enumerate(source):
        if position != target:
            skipped += 1
            continue
        action(item, target)
        target = step(target)

    logger.debug("for_indexed skipped %d element(s)", skipped)
    return source


__all__ = [
    "IndexStep",
    "increment",
    "stride",
    "for_each",
    "for_each_indexed",
    "for_indexed",
]
