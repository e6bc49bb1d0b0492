"""
ctxlog — contextual structured logging on top of structlog.

Wraps a leveled structlog backend with per-call-site context (file, line,
function), a fatal-and-exit helper, and a debug-only trace hook that costs
nothing while disabled.

    from ctxlog import new_backend, new_logger

    backend = new_backend()
    log = new_logger(backend, "ingest")
    log.with_call_site().info("batch_loaded", rows=120)
"""

from ctxlog.backend import Backend, new_backend
from ctxlog.config import LoggerConfig, get_settings
from ctxlog.contextual import ContextualLogger, TraceState, new_logger, new_tracer
from ctxlog.core.callsite import CallSite
from ctxlog.core.exceptions import CtxlogError, InvalidLogLevelError

__version__ = "0.1.0"

__all__ = [
    "Backend",
    "CallSite",
    "ContextualLogger",
    "CtxlogError",
    "InvalidLogLevelError",
    "LoggerConfig",
    "TraceState",
    "get_settings",
    "new_backend",
    "new_logger",
    "new_tracer",
]
