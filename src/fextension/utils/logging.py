"""Logging setup and fan-out call accounting."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", rich_tracebacks: bool = True) -> None:
    """Route the root logger through a :class:`rich.logging.RichHandler`.

    Unknown level names fall back to ``INFO``.
    """

    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    handler = RichHandler(console=Console(), rich_tracebacks=rich_tracebacks)
    logging.basicConfig(level=resolved, format="%(message)s", datefmt="[%X]", handlers=[handler])


@dataclass
class CallCounter:
    """Record which targets a fan-out ran and how many nested multicasts it expanded."""

    nested: int = 0
    per_target: Counter = field(default_factory=Counter)

    @property
    def targets(self) -> int:
        return sum(self.per_target.values())

    def record_target(self, name: str) -> None:
        self.per_target[name] += 1

    def record_nested(self) -> None:
        self.nested += 1

    def log_summary(self) -> None:
        logger.debug("fan-out ran %d target(s), expanded %d nested multicast(s)", self.targets, self.nested)


__all__ = ["setup_logging", "CallCounter"]
