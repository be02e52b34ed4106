"""Diagnostics for the library itself, kept apart from the output it formats.

Purpose
    Let host applications see what the printer does internally (tag changes,
    configuration loads, payloads that failed to parse) without mixing those
    events into the sink output or forcing a logging backend on anyone.

Contents
    - ``CONTEXT``: context variable holding fields attached to every event.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_context``: binds or clears the ambient diagnostic fields.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for structured event payloads.

System Integration
    Used by the printer, the configuration adapters, and the facade. The
    package logger is the stdlib ``logging`` logger ``"lib_pretty_log"`` with a
    ``NullHandler`` attached; sinks never write to it.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

CONTEXT: ContextVar[Mapping[str, Any] | None] = ContextVar("lib_pretty_log_context", default=None)
"""Ambient fields merged into every diagnostic event.

Why
    A host can tag diagnostics with a request or job identifier once instead of
    threading it through every call.
"""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_pretty_log")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers.

    Why
        Leaves the library silent by default while giving host applications full
        control over handler and formatter configuration.
    """

    return _LOGGER


def bind_context(fields: Mapping[str, Any] | None) -> None:
    """Bind or clear the ambient diagnostic fields.

    Examples
    --------
    >>> bind_context({"job": "nightly"})
    >>> dict(CONTEXT.get())
    {'job': 'nightly'}
    >>> bind_context(None)
    >>> CONTEXT.get() is None
    True
    """

    CONTEXT.set(dict(fields) if fields is not None else None)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug diagnostic."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info diagnostic."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error diagnostic."""

    _emit(logging.ERROR, message, fields)


def make_event(kind: str, payload: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a structured diagnostic payload.

    Examples
    --------
    >>> make_event('json', {'error': 'Expecting value'})
    {'kind': 'json', 'error': 'Expecting value'}
    """

    event: dict[str, Any] = {"kind": kind}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a diagnostic through the shared logger with contextual metadata."""

    if not _LOGGER.isEnabledFor(level):
        return
    _LOGGER.log(level, message, extra={"context": _with_context(fields)})


def _with_context(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Merge the bound ambient fields with the event's own fields."""

    context = dict(CONTEXT.get() or {})
    context.update(fields)
    return context
