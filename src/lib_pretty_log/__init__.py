"""Public package surface of ``lib_pretty_log``.

Module-level functions log through one process-wide printer::

    import lib_pretty_log as log

    log.init("SHOP")
    log.debug("cart has %d items", 3)
    log.with_tag("payments").error("charge failed", cause=exc)
    log.json(response_body)

Construct a :class:`Printer` with your own sink for isolated output.
"""

from __future__ import annotations

from .application.ports import Sink
from .application.printer import Printer, PrinterHandle
from .adapters.sinks.default import LoggingSink, StreamSink
from .core import (
    DEFAULT_TAG,
    configure,
    debug,
    debug_line,
    error,
    error_line,
    get_printer,
    info,
    info_line,
    init,
    json,
    reset,
    set_sink,
    t,
    verbose,
    verbose_line,
    warn,
    warn_line,
    with_method_count,
    with_tag,
    with_tag_and_method_count,
    wtf,
    wtf_line,
    xml,
)
from .domain.errors import ConfigError, FormatError, InvalidFormat, NotFound, PayloadParseError, PrettyLogError
from .domain.settings import LogLevel, Settings, Severity
from .observability import bind_context, get_logger

__all__ = [
    "DEFAULT_TAG",
    "ConfigError",
    "FormatError",
    "InvalidFormat",
    "LogLevel",
    "LoggingSink",
    "NotFound",
    "PayloadParseError",
    "PrettyLogError",
    "Printer",
    "PrinterHandle",
    "Settings",
    "Severity",
    "Sink",
    "StreamSink",
    "bind_context",
    "configure",
    "debug",
    "debug_line",
    "error",
    "error_line",
    "get_logger",
    "get_printer",
    "info",
    "info_line",
    "init",
    "json",
    "reset",
    "set_sink",
    "t",
    "verbose",
    "verbose_line",
    "warn",
    "warn_line",
    "with_method_count",
    "with_tag",
    "with_tag_and_method_count",
    "wtf",
    "wtf_line",
    "xml",
]
