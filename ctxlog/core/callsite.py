"""
Caller-frame resolution for contextual log entries.

- resolve_caller(depth): file, line and function of a frame above the caller.
- trim_path(path, marker): cut an absolute source path down to the part after
  the project-root marker; the full path is kept when the marker is missing.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CallSite:
    """Source location of the code that invoked a logger method."""

    file: str
    line: int
    function: str


def trim_path(path: str, marker: Optional[str]) -> str:
    """Return the portion of path after the first marker; path itself if absent."""
    if not marker:
        return path
    _, found, tail = path.partition(marker)
    if not found or not tail:
        return path
    return tail


def resolve_caller(depth: int = 1, marker: Optional[str] = None) -> Optional[CallSite]:
    """
    Resolve the frame `depth` levels above the function calling this one.

    depth=1 from inside a public logger method gives the user code that called
    that method. Returns None when the interpreter exposes no such frame.
    """
    try:
        frame = sys._getframe(depth + 1)
    except (AttributeError, ValueError):
        return None
    code = frame.f_code
    module = frame.f_globals.get("__name__", "")
    qualname = getattr(code, "co_qualname", code.co_name)
    function = f"{module}.{qualname}" if module else qualname
    return CallSite(
        file=trim_path(code.co_filename, marker),
        line=frame.f_lineno,
        function=function,
    )
