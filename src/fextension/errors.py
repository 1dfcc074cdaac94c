"""Error types raised by the :mod:`fextension` helpers."""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T")


class FExtensionError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(FExtensionError, ValueError):
    """Raised when a required selector, action, producer or source is missing."""


class InvalidCastError(FExtensionError, TypeError):
    """Raised when a fan-out result is not an instance of the requested type."""


def require(value: Optional[T], name: str) -> T:
    """Return ``value`` unchanged, raising :class:`InvalidArgumentError` if it is ``None``."""

    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


def require_callable(value: object, name: str):
    """Like :func:`require` but also rejects values that cannot be called."""

    require(value, name)
    if not callable(value):
        raise InvalidArgumentError(f"{name} must be callable, got {type(value).__name__}")
    return value


__all__ = [
    "FExtensionError",
    "InvalidArgumentError",
    "InvalidCastError",
    "require",
    "require_callable",
]
