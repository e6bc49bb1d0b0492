"""
Configuration for ctxlog backends.

Reads settings from environment variables and an optional .env file and
exposes them as an immutable LoggerConfig, built once at the process entry
point and handed to new_backend().
"""

from ctxlog.config.settings import LoggerConfig, get_settings, parse_level  # noqa: F401

__all__ = ["LoggerConfig", "get_settings", "parse_level"]
