"""
Logger settings.

LoggerConfig is the explicit, passed-by-reference replacement for process-wide
logger state: the entry point builds one (usually via get_settings()) and
gives it to new_backend().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TextIO, Union

from ctxlog.config import env
from ctxlog.core.exceptions import InvalidLogLevelError

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}
_LEVEL_NUMBERS = frozenset(_LEVEL_NAMES.values())


def parse_level(level: Union[int, str]) -> int:
    """
    Return the numeric logging level for a name ("debug", "INFO", ...) or number.

    Raises InvalidLogLevelError for anything else.
    """
    if isinstance(level, bool):
        raise InvalidLogLevelError(level)
    if isinstance(level, int):
        if level in _LEVEL_NUMBERS:
            return level
        raise InvalidLogLevelError(level)
    if isinstance(level, str):
        value = _LEVEL_NAMES.get(level.strip().upper())
        if value is not None:
            return value
    raise InvalidLogLevelError(level)


@dataclass(frozen=True)
class LoggerConfig:
    """
    Settings for one Backend.

    stream=None means sys.stdout at backend construction time.
    exit_func is called by fatal_and_exit after the entry is written.
    """

    level: int = logging.INFO
    log_format: str = env.DEFAULT_LOG_FORMAT
    root_marker: Optional[str] = None
    stream: Optional[TextIO] = None
    exit_func: Optional[Callable[[int], Any]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", parse_level(self.level))
        if self.log_format not in env.LOG_FORMATS:
            object.__setattr__(self, "log_format", env.DEFAULT_LOG_FORMAT)


def get_settings() -> LoggerConfig:
    """
    Return settings read from the environment (and .env).

    An unknown LOG_LEVEL falls back to INFO rather than failing startup.
    """
    try:
        level = parse_level(env.get_log_level_name())
    except InvalidLogLevelError:
        level = logging.INFO
    return LoggerConfig(
        level=level,
        log_format=env.get_log_format(),
        root_marker=env.get_root_marker(),
    )
