"""
ContextualLogger: a named view over a Backend with call-site context and tracing.

Usage:
    backend = new_backend()
    log = new_logger(backend, "scheduler")

    log.info("tick", count=3)                     # plain leveled entry
    log.with_call_site().warning("slow_query")    # adds File / Line fields
    log.trace_on(); log.trace("state", state)     # debug-level only
    log.fatal_and_exit(err)                       # logs, then terminates

Every entry carries the logger name under "logger". Trace lines are prefixed
with the instance's trace_id so a diagnostic session can be grepped as one.
"""

from __future__ import annotations

import enum
import logging
import uuid
from typing import Any, Mapping, NoReturn, Optional

from ctxlog.backend import Backend
from ctxlog.core.callsite import resolve_caller

TRACER_NAME = "Tracer"
FATAL_EVENT = "Fatal Error"


class TraceState(enum.Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


def _new_trace_id() -> str:
    return str(uuid.uuid4())


def _interpolate(fmt: str, args: tuple) -> str:
    """fmt % args; on a mismatched format, fmt verbatim plus the reprs of args."""
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        extra = ", ".join(repr(arg) for arg in args)
        return f"{fmt} %!(EXTRA {extra})"


class ContextualLogger:
    """
    Leveled logger bound to a Backend, a name, and a set of fields.

    Loggers are immutable apart from their trace state: bind(),
    with_fields() and with_call_site() return new instances sharing the
    backend.
    """

    def __init__(
        self,
        backend: Backend,
        name: str,
        *,
        fields: Optional[Mapping[str, Any]] = None,
        trace_state: TraceState = TraceState.DISABLED,
        trace_id: Optional[str] = None,
    ) -> None:
        self.backend = backend
        self.name = name
        self._fields: dict[str, Any] = dict(fields or {})
        self._trace_state = trace_state
        self.trace_id = trace_id or _new_trace_id()

    def __repr__(self) -> str:
        return f"<ContextualLogger name={self.name!r} trace={self._trace_state.value} trace_id={self.trace_id}>"

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def _derive(self, **changes: Any) -> "ContextualLogger":
        kwargs: dict[str, Any] = {
            "fields": self._fields,
            "trace_state": self._trace_state,
            "trace_id": self.trace_id,
        }
        kwargs.update(changes)
        return ContextualLogger(self.backend, self.name, **kwargs)

    def bind(self, **fields: Any) -> "ContextualLogger":
        """Return a logger with fields merged into every entry."""
        return self._derive(fields={**self._fields, **fields})

    def with_fields(self, fields: Mapping[str, Any]) -> "ContextualLogger":
        return self.bind(**fields)

    # ── leveled calls ────────────────────────────────────────

    def _log(self, method: str, event: str, args: tuple, kw: dict[str, Any]) -> None:
        self.backend.emit(method, event, *args, **{"logger": self.name, **self._fields, **kw})

    def debug(self, event: str, *args: Any, **kw: Any) -> None:
        self._log("debug", event, args, kw)

    def info(self, event: str, *args: Any, **kw: Any) -> None:
        self._log("info", event, args, kw)

    def warning(self, event: str, *args: Any, **kw: Any) -> None:
        self._log("warning", event, args, kw)

    warn = warning

    def error(self, event: str, *args: Any, **kw: Any) -> None:
        self._log("error", event, args, kw)

    def exception(self, event: str, *args: Any, **kw: Any) -> None:
        """Log at error level with the active exception's traceback attached."""
        self._log("exception", event, args, kw)

    def critical(self, event: str, *args: Any, **kw: Any) -> None:
        self._log("critical", event, args, kw)

    fatal = critical

    # ── call-site context ────────────────────────────────────

    def with_call_site(self) -> "ContextualLogger":
        """
        Return a logger whose entries carry the caller's File and Line.

        Tracing is off on the result and it gets its own trace_id. When the
        caller's frame is unavailable, self is returned unchanged.
        """
        site = resolve_caller(1, self.backend.root_marker)
        if site is None:
            return self
        return self._derive(
            fields={**self._fields, "File": site.file, "Line": site.line},
            trace_state=TraceState.DISABLED,
            trace_id=_new_trace_id(),
        )

    def fatal_and_exit(self, err: BaseException | str) -> NoReturn:
        """Log err at critical level with the caller's location, then terminate the process."""
        site = resolve_caller(1, self.backend.root_marker)
        try:
            if site is None:
                self.critical(FATAL_EVENT, Error=str(err))
            else:
                self.critical(
                    FATAL_EVENT,
                    File=site.file,
                    Line=site.line,
                    Function=site.function,
                    Error=str(err),
                )
        finally:
            # exit even when the sink raises
            self.backend.exit(1)
        # exit_func returned (only possible with a custom hook); never fall through
        raise SystemExit(1)

    # ── tracing ──────────────────────────────────────────────

    @property
    def trace_enabled(self) -> bool:
        return self._trace_state is TraceState.ENABLED

    def trace_on(self) -> None:
        self._trace_state = TraceState.ENABLED

    def trace_off(self) -> None:
        self._trace_state = TraceState.DISABLED

    def _tracing(self) -> bool:
        return self._trace_state is TraceState.ENABLED and self.backend.is_enabled_for(logging.DEBUG)

    def _trace_prefix(self) -> str:
        # caller of trace()/tracef() is two frames above this helper
        site = resolve_caller(2, self.backend.root_marker)
        if site is None:
            return f"{self.trace_id} "
        return f"{self.trace_id} File:{site.file} Line:{site.line} "

    def trace(self, *args: Any) -> None:
        """Debug-level entry prefixed with trace_id and call site; no-op unless tracing at debug."""
        if not self._tracing():
            return
        message = " ".join(str(arg) for arg in args)
        self.debug(self._trace_prefix() + message)

    def tracef(self, fmt: str, *args: Any) -> None:
        """
        Like trace, with fmt % args as the message.

        The composed line is emitted without further %-interpolation, so '%'
        in the prefix or in argument values is written literally. A format that
        does not match its args (a bare '%', too many or too few args) is
        written as-is with the args appended, never raised to the caller.
        """
        if not self._tracing():
            return
        message = _interpolate(fmt, args)
        self.debug(self._trace_prefix() + message)


def new_logger(backend: Backend, name: str) -> ContextualLogger:
    """Return a logger labeled name, with tracing disabled."""
    return ContextualLogger(backend, name)


def new_tracer(backend: Backend) -> ContextualLogger:
    """Return an ad-hoc diagnostic logger with tracing enabled and a fresh trace_id."""
    return ContextualLogger(backend, TRACER_NAME, trace_state=TraceState.ENABLED)
