"""
Package exceptions.

Call-site lookups never raise; only explicit configuration mistakes do.
"""

from __future__ import annotations


class CtxlogError(Exception):
    """Base class for ctxlog errors."""


class InvalidLogLevelError(CtxlogError, ValueError):
    """Raised when a level name or number is not a known logging level."""

    def __init__(self, level: object) -> None:
        super().__init__(f"Invalid log level: {level!r}")
        self.level = level
