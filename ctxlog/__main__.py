"""
ctxlog entry point: builds the backend once from env settings and emits a few
sample entries, optionally with tracing.

Env: LOG_LEVEL, LOG_FORMAT, CTXLOG_ROOT_MARKER (flags override the first two).

Usage:
  python -m ctxlog --level debug --trace
"""

from __future__ import annotations

import argparse
import dataclasses
from typing import Optional, Sequence

from ctxlog.backend import new_backend
from ctxlog.config import get_settings, parse_level
from ctxlog.contextual import new_logger, new_tracer
from ctxlog.core.exceptions import InvalidLogLevelError


def _level_arg(raw: str) -> int:
    try:
        return parse_level(raw)
    except InvalidLogLevelError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ctxlog", description="Emit sample contextual log entries.")
    parser.add_argument("--level", type=_level_arg, help="override LOG_LEVEL (debug, info, warning, error, critical)")
    parser.add_argument("--format", dest="log_format", choices=("console", "json"), help="override LOG_FORMAT")
    parser.add_argument("--trace", action="store_true", help="also emit trace lines from a tracer")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = get_settings()
    if args.level is not None:
        config = dataclasses.replace(config, level=args.level)
    if args.log_format:
        config = dataclasses.replace(config, log_format=args.log_format)

    backend = new_backend(config)
    logger = new_logger(backend, "main")
    logger.with_call_site().info("main_started", level=backend.level, log_format=config.log_format)

    if args.trace:
        tracer = new_tracer(backend)
        tracer.trace("tracer_started")
        tracer.tracef("trace_id=%s", tracer.trace_id)

    logger.info("main_finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
