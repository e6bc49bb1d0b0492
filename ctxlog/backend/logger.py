"""
Structured logging backend: timestamp, level, logger name, bound fields.

One Backend owns the output stream, renderer, level threshold and exit hook.
It is built at the process entry point (new_backend) and passed to each
ContextualLogger; nothing here is configured globally, so several backends
can coexist (tests rely on that).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Callable, Optional, TextIO, Union

import structlog

from ctxlog.config.settings import LoggerConfig, get_settings, parse_level


def _build_processors(log_format: str) -> list[Any]:
    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


class Backend:
    """
    Process-wide leveled logger.

    emit() drops entries below the current level; set_level() may be called at
    runtime and takes effect for every logger sharing this backend.
    """

    def __init__(self, config: LoggerConfig) -> None:
        self.config = config
        self.stream: TextIO = config.stream if config.stream is not None else sys.stdout
        self.root_marker = config.root_marker
        self._exit_func: Callable[[int], Any] = config.exit_func or os._exit
        self._processors = _build_processors(config.log_format)
        self._level = config.level
        self._logger = self._wrap(self._level)

    def _wrap(self, level: int) -> Any:
        return structlog.wrap_logger(
            structlog.PrintLogger(file=self.stream),
            processors=self._processors,
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            cache_logger_on_first_use=False,
        )

    @property
    def level(self) -> int:
        return self._level

    def set_level(self, level: Union[int, str]) -> None:
        """Change the threshold; raises InvalidLogLevelError for unknown levels."""
        value = parse_level(level)
        self._logger = self._wrap(value)
        self._level = value

    def is_enabled_for(self, level: int) -> bool:
        return level >= self._level

    def emit(self, method: str, event: str, *args: Any, **fields: Any) -> None:
        """Forward one entry to structlog, e.g. emit("info", "started", port=80)."""
        getattr(self._logger, method)(event, *args, **fields)

    def flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()

    def exit(self, code: int = 1) -> None:
        """Flush output and terminate the process through the configured exit function."""
        try:
            self.flush()
        finally:
            self._exit_func(code)

    def __repr__(self) -> str:
        return f"<Backend level={logging.getLevelName(self._level)} format={self.config.log_format}>"


def new_backend(config: Optional[LoggerConfig] = None) -> Backend:
    """
    Return a Backend for config, or for the environment settings when omitted.

        backend = new_backend(LoggerConfig(level=logging.DEBUG))
    """
    return Backend(config if config is not None else get_settings())
