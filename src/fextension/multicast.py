"""Multicast callables and fan-out invocation.

A :class:`Multicast` is an ordered, immutable collection of callables that are
all invoked together. Calling it behaves like a single function whose result is
the result of the last target. :func:`invoke_all` instead collects the result
of every target, descending into nested multicasts.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, List, Optional, Tuple, Type, Union

from .errors import InvalidCastError, require, require_callable
from .utils.logging import CallCounter

logger = logging.getLogger(__name__)

ResultType = Union[Type[Any], Tuple[Type[Any], ...]]


class Multicast:
    """Ordered group of callables invoked with shared arguments."""

    __slots__ = ("_targets",)

    def __init__(self, *targets: Callable[..., Any]) -> None:
        for position, target in enumerate(targets):
            require_callable(target, f"targets[{position}]")
        self._targets: Tuple[Callable[..., Any], ...] = tuple(targets)

    @property
    def targets(self) -> Tuple[Callable[..., Any], ...]:
        """Directly attached targets; nested multicasts are not expanded."""
        return self._targets

    def invocation_list(self) -> List[Callable[..., Any]]:
        """Every leaf callable in invocation order, with nesting flattened."""

        leaves: List[Callable[..., Any]] = []
        for target in self._targets:
            if isinstance(target, Multicast):
                leaves.extend(target.invocation_list())
            else:
                leaves.append(target)
        return leaves

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        result = None
        for target in self._targets:
            result = target(*args, **kwargs)
        return result

    def __add__(self, other: Any) -> "Multicast":
        if isinstance(other, Multicast):
            return Multicast(*self._targets, *other._targets)
        if callable(other):
            return Multicast(*self._targets, other)
        return NotImplemented

    def __radd__(self, other: Any) -> "Multicast":
        if callable(other):
            return Multicast(other, *self._targets)
        return NotImplemented

    def __sub__(self, other: Any) -> "Multicast":
        if isinstance(other, Multicast):
            removed = other._targets
        elif callable(other):
            removed = (other,)
        else:
            return NotImplemented
        width = len(removed)
        if width == 0:
            return self
        # Drop the last contiguous run matching ``removed``.
        for start in range(len(self._targets) - width, -1, -1):
            if self._targets[start : start + width] == removed:
                return Multicast(*self._targets[:start], *self._targets[start + width :])
        return self

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[Callable[..., Any]]:
        return iter(self._targets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multicast):
            return NotImplemented
        return self._targets == other._targets

    def __hash__(self) -> int:
        return hash(self._targets)

    def __repr__(self) -> str:
        names = ", ".join(getattr(t, "__qualname__", repr(t)) for t in self._targets)
        return f"Multicast({names})"


def _collect(
    multicast: Multicast,
    args: Tuple[Any, ...],
    kwargs: dict,
    result_type: Optional[ResultType],
    counter: Optional[CallCounter],
    out: List[Any],
) -> None:
    for target in multicast.targets:
        if isinstance(target, Multicast):
            if counter is not None:
                counter.record_nested()
            _collect(target, args, kwargs, result_type, counter, out)
            continue
        name = getattr(target, "__qualname__", repr(target))
        result = target(*args, **kwargs)
        if counter is not None:
            counter.record_target(name)
        if result_type is not None and not isinstance(result, result_type):
            raise InvalidCastError(
                f"{name} returned {type(result).__name__}, which cannot be cast to {_type_name(result_type)}"
            )
        out.append(result)


def _type_name(result_type: ResultType) -> str:
    if isinstance(result_type, tuple):
        return " | ".join(t.__name__ for t in result_type)
    return result_type.__name__


def invoke_all(
    multicast: Union[Multicast, Callable[..., Any]],
    *args: Any,
    result_type: Optional[ResultType] = None,
    counter: Optional[CallCounter] = None,
    **kwargs: Any,
) -> List[Any]:
    """Invoke every target of ``multicast`` and return all results in order.

    Parameters
    ----------
    multicast:
        A :class:`Multicast` or any single callable, which is treated as a
        multicast with one target.
    *args, **kwargs:
        Arguments passed unchanged to every target.
    result_type:
        Type (or tuple of types) every result must be an instance of. A
        mismatch raises :class:`~fextension.errors.InvalidCastError`.
    counter:
        Optional :class:`~fextension.utils.logging.CallCounter` receiving each
        target run (keyed by qualified name) and each nested multicast expanded.
    """

    require(multicast, "multicast")
    require_callable(multicast, "multicast")
    if not isinstance(multicast, Multicast):
        multicast = Multicast(multicast)

    results: List[Any] = []
    _collect(multicast, args, kwargs, result_type, counter, results)
    logger.debug("invoke_all collected %d result(s)", len(results))
    if counter is not None:
        counter.log_summary()
    return results


__all__ = ["Multicast", "invoke_all"]
