"""The log-call orchestrator.

Purpose
-------
Turn one logging call into the ordered sequence of sink lines it produces:
resolve the effective tag and frame count, format the message, render the
call-site header, chunk the body, and hand every line to the sink, all while
holding a lock so concurrent calls never interleave.

Contents
--------
* :class:`Printer` – owns settings, the global tag, per-context overrides,
  the sink, and the lock.
* :class:`PrinterHandle` – returned by :meth:`Printer.t`; the next call made
  through it (or through the printer) consumes the overrides.

System Role
-----------
The package facade in :mod:`lib_pretty_log.core` holds one process-wide
:class:`Printer`. Applications that want isolated output (tests, embedded
libraries) construct their own with an explicit sink.
"""

from __future__ import annotations

import threading
from contextvars import ContextVar
from itertools import count as _counter
from typing import Any, Final, Sequence

from ..domain.errors import ConfigError, PayloadParseError
from ..domain.settings import LogLevel, Settings, Severity
from ..observability import log_debug, log_error, make_event
from .callsite import CallSiteInspector
from .chunking import CHUNK_SIZE, ENCODING, chunk_bytes, decode_chunks, split_lines
from .formatting import compose_error_message, format_message
from .ports import Sink
from .pretty import EMPTY_JSON_MESSAGE, EMPTY_XML_MESSAGE, render_json, render_xml

__pretty_log_internal__ = True

DEFAULT_TAG: Final[str] = "PRETTYLOGGER"
SINGLE_LINE_METHOD_COUNT: Final[int] = 1

_INSTANCE_IDS = _counter(1)


class Printer:
    """Format and emit log calls through a :class:`~lib_pretty_log.application.ports.Sink`.

    Why
    ----
    Centralises the per-call pipeline so every entry point (leveled calls,
    single-line calls, payload pretty-printing) shares header, chunking, and
    locking behaviour.

    Parameters
    ----------
    sink:
        Destination for finished lines.
    tag:
        Initial global tag; validated like :meth:`init`.
    settings:
        Shared settings object; a fresh :class:`Settings` when omitted.
    inspector:
        Call-site inspector; injectable for deterministic headers in tests.
    chunk_size:
        Maximum UTF-8 bytes per emitted body chunk.

    Examples
    --------
    >>> from lib_pretty_log.testing import RecordingSink
    >>> sink = RecordingSink()
    >>> printer = Printer(sink, tag="APP")
    >>> _ = printer.settings.set_method_count(0)
    >>> printer.info("ready in %d ms", 12)
    >>> sink.lines()
    ['ready in 12 ms']
    >>> sink.records[-1].tag
    'APP'
    """

    def __init__(
        self,
        sink: Sink,
        *,
        tag: str = DEFAULT_TAG,
        settings: Settings | None = None,
        inspector: CallSiteInspector | None = None,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        self._sink = sink
        self._tag = _validate_tag(tag)
        self._settings = settings if settings is not None else Settings()
        self._inspector = inspector if inspector is not None else CallSiteInspector()
        self._chunk_size = chunk_size
        self._lock = threading.RLock()
        instance = next(_INSTANCE_IDS)
        self._local_tag: ContextVar[str | None] = ContextVar(f"lib_pretty_log_tag_{instance}", default=None)
        self._local_method_count: ContextVar[int | None] = ContextVar(
            f"lib_pretty_log_method_count_{instance}", default=None
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def tag(self) -> str:
        with self._lock:
            return self._tag

    @property
    def sink(self) -> Sink:
        with self._lock:
            return self._sink

    def set_sink(self, sink: Sink) -> None:
        """Swap the destination; calls already in flight finish on the old sink."""

        with self._lock:
            self._sink = sink
        log_debug("sink_replaced", sink=type(sink).__name__)

    def init(self, tag: str) -> Settings:
        """Set the global tag and return the settings for chained configuration.

        Raises
        ------
        ConfigError
            When *tag* is ``None``, empty, or whitespace only.
        """

        validated = _validate_tag(tag)
        with self._lock:
            self._tag = validated
        log_debug("printer_initialised", tag=validated)
        return self._settings

    def t(self, tag: str | None = None, method_count: int | None = None) -> "PrinterHandle":
        """Override tag and/or frame count for the next call in this context.

        The overrides live in context variables, so they are private to the
        calling thread or asyncio task, and the next log call clears them.
        """

        if tag is not None:
            self._local_tag.set(tag)
        if method_count is not None:
            self._local_method_count.set(method_count)
        return PrinterHandle(self)

    def log(self, severity: Severity, message: str, *args: Any, multiline: bool = True) -> None:
        self._log(severity, multiline, message, args)

    def debug(self, message: str, *args: Any, multiline: bool = True) -> None:
        self._log(Severity.DEBUG, multiline, message, args)

    def info(self, message: str, *args: Any, multiline: bool = True) -> None:
        self._log(Severity.INFO, multiline, message, args)

    def warn(self, message: str, *args: Any, multiline: bool = True) -> None:
        self._log(Severity.WARN, multiline, message, args)

    def verbose(self, message: str, *args: Any, multiline: bool = True) -> None:
        self._log(Severity.VERBOSE, multiline, message, args)

    def wtf(self, message: str, *args: Any, multiline: bool = True) -> None:
        self._log(Severity.ASSERT, multiline, message, args)

    def error(
        self,
        message: str | None = None,
        *args: Any,
        cause: BaseException | None = None,
        multiline: bool = True,
    ) -> None:
        """Log at error level, appending ``" : <cause>"`` when *cause* is given."""

        self._log(Severity.ERROR, multiline, message, args, cause=cause)

    def single_line(
        self,
        severity: Severity,
        tag: str,
        message: str | None,
        cause: BaseException | None = None,
    ) -> None:
        """Emit one header-prefixed line under *tag* with a single frame.

        Why
        ----
        One-shot calls want a compact ``(file:line)=>function`` prefix instead
        of a header block.

        What
        ----
        *tag* stands in for the global tag and ``1`` for the default frame
        count for this call only. Neither the shared tag nor the settings are
        written, so a concurrent :meth:`init` or ``set_method_count`` is never
        undone by this call. A pending :meth:`t` override still applies.
        """

        self._log(
            severity,
            False,
            message,
            (),
            cause=cause,
            global_tag=_validate_tag(tag),
            default_method_count=SINGLE_LINE_METHOD_COUNT,
        )

    def json(self, text: str | None) -> None:
        """Pretty-print a JSON object or array at debug level.

        Blank input logs a fixed notice; malformed input logs the parser
        message followed by the raw text at error level instead of raising.
        """

        try:
            rendered = render_json(text)
        except PayloadParseError as exc:
            log_error("payload_parse_failed", **make_event("json", {"error": exc.cause}))
            self._log(Severity.ERROR, True, exc.describe(), ())
            return
        self._log(Severity.DEBUG, True, EMPTY_JSON_MESSAGE if rendered is None else rendered, ())

    def xml(self, text: str | None) -> None:
        """Pretty-print an XML document at debug level (see :meth:`json`)."""

        try:
            rendered = render_xml(text)
        except PayloadParseError as exc:
            log_error("payload_parse_failed", **make_event("xml", {"error": exc.cause}))
            self._log(Severity.ERROR, True, exc.describe(), ())
            return
        self._log(Severity.DEBUG, True, EMPTY_XML_MESSAGE if rendered is None else rendered, ())

    def _log(
        self,
        severity: Severity,
        multiline: bool,
        template: str | None,
        args: Sequence[Any],
        *,
        cause: BaseException | None = None,
        global_tag: str | None = None,
        default_method_count: int | None = None,
    ) -> None:
        level = self._settings.log_level
        if level is LogLevel.NONE or severity < level:
            self._discard_overrides()
            return

        with self._lock:
            base_tag = global_tag if global_tag is not None else self._tag
            tag = self._resolve_tag(base_tag)
            method_count = self._resolve_method_count(default_method_count)
            formatted = format_message(template, args) if template is not None else None
            message = compose_error_message(formatted, cause)
            show_thread_info = self._settings.show_thread_info
            final_tag = _format_tag(base_tag, tag)

            if multiline:
                for line in self._inspector.header_lines(method_count, show_thread_info=show_thread_info):
                    self._sink.emit(severity, final_tag, line)
            else:
                message = self._inspector.header_text(method_count, show_thread_info=show_thread_info) + message
            self._write_body(severity, final_tag, message)

    def _write_body(self, severity: Severity, tag: str, message: str) -> None:
        # Lone surrogates (os.fsdecode of undecodable bytes) become \udcXX escapes.
        payload = message.encode(ENCODING, errors="backslashreplace")
        for text in decode_chunks(chunk_bytes(payload, self._chunk_size)):
            for line in split_lines(text):
                self._sink.emit(severity, tag, line)

    def _resolve_tag(self, default: str) -> str:
        tag = self._local_tag.get()
        if tag is not None:
            self._local_tag.set(None)
            return tag
        return default

    def _resolve_method_count(self, default: int | None = None) -> int:
        result = self._settings.method_count if default is None else default
        local = self._local_method_count.get()
        if local is not None:
            self._local_method_count.set(None)
            result = local
        if result < 0:
            raise ConfigError(f"methodCount cannot be negative: {result}")
        return result

    def _discard_overrides(self) -> None:
        self._local_tag.set(None)
        self._local_method_count.set(None)


class PrinterHandle:
    """Entry points bound to a printer after :meth:`Printer.t`.

    Examples
    --------
    >>> from lib_pretty_log.testing import RecordingSink
    >>> sink = RecordingSink()
    >>> printer = Printer(sink, tag="APP", settings=Settings(method_count=0))
    >>> printer.t("net").info("connected")
    >>> printer.info("idle")
    >>> [record.tag for record in sink.records][-2:]
    ['APP-net', 'APP']
    """

    __slots__ = ("_printer",)

    def __init__(self, printer: Printer) -> None:
        self._printer = printer

    @property
    def printer(self) -> Printer:
        return self._printer

    def log(self, severity: Severity, message: str, *args: Any) -> None:
        self._printer.log(severity, message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self._printer.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._printer.info(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._printer.warn(message, *args)

    def verbose(self, message: str, *args: Any) -> None:
        self._printer.verbose(message, *args)

    def wtf(self, message: str, *args: Any) -> None:
        self._printer.wtf(message, *args)

    def error(self, message: str | None = None, *args: Any, cause: BaseException | None = None) -> None:
        self._printer.error(message, *args, cause=cause)

    def json(self, text: str | None) -> None:
        self._printer.json(text)

    def xml(self, text: str | None) -> None:
        self._printer.xml(text)


def _validate_tag(tag: str | None) -> str:
    if tag is None:
        raise ConfigError("tag may not be null")
    if not isinstance(tag, str):
        raise ConfigError(f"tag must be a string, got {type(tag).__name__}")
    if not tag.strip():
        raise ConfigError("tag may not be empty")
    return tag


def _format_tag(global_tag: str, tag: str) -> str:
    """Return *global_tag*, suffixed with ``-tag`` when *tag* differs from it.

    Examples
    --------
    >>> _format_tag("APP", "net"), _format_tag("APP", "APP"), _format_tag("APP", "")
    ('APP-net', 'APP', 'APP')
    """

    if tag and tag != global_tag:
        return f"{global_tag}-{tag}"
    return global_tag
