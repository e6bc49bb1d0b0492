"""
Environment variable loading for ctxlog.

- LOG_LEVEL: debug | info | warning | error | critical (default: info)
- LOG_FORMAT: console | json (default: console)
- CTXLOG_ROOT_MARKER: path segment after which source paths are reported
  (default: "/<project root directory name>/")
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Project root: config is ctxlog/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"
LOG_FORMATS = ("console", "json")


def load_ctxlog_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides set vars."""
    load_dotenv(_ENV_PATH)


def get_log_level_name() -> str:
    """Return LOG_LEVEL from env, upper-cased. Default: INFO."""
    load_ctxlog_env()
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()


def get_log_format() -> str:
    """
    Return LOG_FORMAT from env: console | json.
    Unknown values fall back to console.
    """
    load_ctxlog_env()
    raw = (os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT).strip().lower()
    return raw if raw in LOG_FORMATS else DEFAULT_LOG_FORMAT


def get_root_marker() -> Optional[str]:
    """
    Return CTXLOG_ROOT_MARKER from env, or the project root directory name
    wrapped in slashes. None (no trimming) when the root has no name.
    """
    load_ctxlog_env()
    marker = (os.getenv("CTXLOG_ROOT_MARKER") or "").strip()
    if marker:
        return marker
    if not _ROOT.name:
        return None
    return f"/{_ROOT.name}/"
