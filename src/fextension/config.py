"""Configuration utilities for the :mod:`fextension` helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar, Union

import yaml

from .functional import IndexStep, for_each_indexed, for_indexed, stride
from .utils.logging import setup_logging

S = TypeVar("S", bound=Iterable[Any])


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class IterationConfig:
    """Default start index and stride for the indexed iteration helpers."""

    start_index: int = 0
    index_step: int = 1

    def stepper(self) -> IndexStep:
        return stride(self.index_step)

    def for_each_indexed(self, source: S, action: Callable[[Any, int], Any]) -> S:
        """:func:`~fextension.functional.for_each_indexed` starting and stepping as configured."""
        return for_each_indexed(source, action, start_index=self.start_index, index_step=self.stepper())

    def for_indexed(self, source: S, action: Callable[[Any, int], Any]) -> S:
        """:func:`~fextension.functional.for_indexed` starting and stepping as configured."""
        return for_indexed(source, action, start_index=self.start_index, index_step=self.stepper())


@dataclass
class ExtensionConfig:
    """Top-level configuration object composed of sub-configurations."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    iteration: IterationConfig = field(default_factory=IterationConfig)


def load_yaml(path: Union[str, Path]) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with Path(path).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{path} must contain a mapping")
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> ExtensionConfig:
    """Load :class:`ExtensionConfig` from ``path``; defaults when ``path`` is ``None``."""

    if path is None:
        return ExtensionConfig()

    raw = load_yaml(path)
    logging_cfg = raw.get("logging") or {}
    iteration = raw.get("iteration") or {}

    return ExtensionConfig(
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
        iteration=IterationConfig(
            start_index=int(iteration.get("start_index", 0)),
            index_step=int(iteration.get("index_step", 1)),
        ),
    )


def configure(config: ExtensionConfig) -> None:
    """Apply the logging section of ``config``."""

    setup_logging(level=config.logging.level, rich_tracebacks=config.logging.rich_tracebacks)


__all__ = [
    "LoggingConfig",
    "IterationConfig",
    "ExtensionConfig",
    "load_yaml",
    "load_config",
    "configure",
]
