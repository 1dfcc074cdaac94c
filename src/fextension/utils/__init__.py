"""Utility helpers for the :mod:`fextension` package."""

from .logging import CallCounter, setup_logging

__all__ = ["CallCounter", "setup_logging"]
