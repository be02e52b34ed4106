"""Composition root and one-call facade for ``lib_pretty_log``.

Purpose
-------
Wire the process-wide :class:`~lib_pretty_log.application.printer.Printer`
to its default sink and expose the module-level entry points applications
call directly (``lib_pretty_log.debug("...")``).

Contents
--------
* :data:`DEFAULT_TAG` / :data:`ENV_PREFIX` – facade defaults.
* :func:`init`, :func:`configure`, :func:`set_sink`, :func:`get_printer`,
  :func:`reset` – configuration.
* :func:`t`, :func:`with_tag`, :func:`with_method_count`,
  :func:`with_tag_and_method_count` – per-call overrides.
* :func:`debug`, :func:`info`, :func:`warn`, :func:`verbose`, :func:`wtf`,
  :func:`error` – multi-line leveled logging.
* :func:`debug_line` … :func:`error_line` – single-line one-shot variants.
* :func:`json`, :func:`xml` – structured payload printing.

System Role
-----------
Everything here funnels into the single shared printer, so one global tag and
one settings object apply to the whole process, as callers of a global logger
expect. Frames of this module are skipped when call-site headers are built.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final, Mapping

from .adapters.env.default import DefaultEnvLoader, default_env_prefix
from .adapters.file_loaders.structured import loader_for
from .adapters.sinks.default import LoggingSink
from .application.ports import Sink
from .application.printer import DEFAULT_TAG, Printer, PrinterHandle
from .domain.settings import Settings, Severity
from .observability import log_info, make_event

__pretty_log_internal__ = True

ENV_PREFIX: Final[str] = default_env_prefix("lib-pretty-log")

_PRINTER: Final[Printer] = Printer(LoggingSink(), tag=DEFAULT_TAG)


def get_printer() -> Printer:
    """Return the process-wide printer behind the module-level functions."""

    return _PRINTER


def set_sink(sink: Sink) -> None:
    """Route all facade output to *sink*."""

    _PRINTER.set_sink(sink)


def init(tag: str = DEFAULT_TAG) -> Settings:
    """Set the global tag and return the shared settings.

    Raises
    ------
    ConfigError
        When *tag* is ``None``, empty, or whitespace only.

    Examples
    --------
    >>> init("APP").set_method_count(1).method_count
    1
    >>> _ = reset()
    """

    return _PRINTER.init(tag)


def configure(path: str | Path | None = None, *, environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from an optional file, then from the environment.

    Why
    ----
    Deployments adjust verbosity without code changes.

    What
    ----
    Reads *path* (TOML, JSON or YAML; a ``pretty_log`` section is used when
    present) and then ``LIB_PRETTY_LOG_*`` variables, environment values
    winning. ``tag`` is passed to :func:`init`; ``level``, ``method_count`` and
    ``show_thread_info`` go to :meth:`Settings.apply`.

    Raises
    ------
    NotFound / InvalidFormat / ConfigError
        For a missing or malformed file and for invalid values.
    """

    values: dict[str, Any] = {}
    if path is not None:
        values.update(_normalise(loader_for(str(path)).load(str(path))))
    values.update(_normalise(DefaultEnvLoader(environ=environ).load(ENV_PREFIX)))

    settings = _PRINTER.settings.apply(values)
    tag = values.get("tag")
    if tag is not None:
        _PRINTER.init(str(tag))
    event = make_event("configure", {"path": str(path) if path else None, "keys": sorted(values)})
    log_info("settings_applied", **event)
    return settings


def _normalise(values: Mapping[str, object]) -> dict[str, object]:
    """Fold the ``log_level`` alias into ``level`` so later sources override earlier ones."""

    result = dict(values)
    if "log_level" in result:
        result["level"] = result.pop("log_level")
    return result


def reset() -> Settings:
    """Restore the default tag, settings, and sink of the shared printer."""

    _PRINTER.init(DEFAULT_TAG)
    _PRINTER.set_sink(LoggingSink())
    return _PRINTER.settings.reset()


def t(tag: str | None = None, method_count: int | None = None) -> PrinterHandle:
    """Override tag and/or frame count for the next call in this thread or task."""

    return _PRINTER.t(tag, method_count)


def with_tag(tag: str) -> PrinterHandle:
    return _PRINTER.t(tag, None)


def with_method_count(method_count: int) -> PrinterHandle:
    return _PRINTER.t(None, method_count)


def with_tag_and_method_count(tag: str, method_count: int) -> PrinterHandle:
    return _PRINTER.t(tag, method_count)


def debug(message: str, *args: Any) -> None:
    _PRINTER.debug(message, *args)


def info(message: str, *args: Any) -> None:
    _PRINTER.info(message, *args)


def warn(message: str, *args: Any) -> None:
    _PRINTER.warn(message, *args)


def verbose(message: str, *args: Any) -> None:
    _PRINTER.verbose(message, *args)


def wtf(message: str, *args: Any) -> None:
    """Log at assert level: a condition that should never happen."""

    _PRINTER.wtf(message, *args)


def error(message: str | None = None, *args: Any, cause: BaseException | None = None) -> None:
    """Log at error level; *cause* is appended as ``" : <Type>: <text>"``."""

    _PRINTER.error(message, *args, cause=cause)


def debug_line(tag: str, message: str) -> None:
    """Emit one line under *tag* prefixed with the caller's location."""

    _PRINTER.single_line(Severity.DEBUG, tag, message)


def info_line(tag: str, message: str) -> None:
    _PRINTER.single_line(Severity.INFO, tag, message)


def warn_line(tag: str, message: str) -> None:
    _PRINTER.single_line(Severity.WARN, tag, message)


def verbose_line(tag: str, message: str) -> None:
    _PRINTER.single_line(Severity.VERBOSE, tag, message)


def wtf_line(tag: str, message: str) -> None:
    _PRINTER.single_line(Severity.ASSERT, tag, message)


def error_line(tag: str, message: str | None, cause: BaseException | None = None) -> None:
    _PRINTER.single_line(Severity.ERROR, tag, message, cause)


def json(text: str | None) -> None:
    """Pretty-print a JSON object or array at debug level."""

    _PRINTER.json(text)


def xml(text: str | None) -> None:
    """Pretty-print an XML document at debug level."""

    _PRINTER.xml(text)


__all__ = [
    "DEFAULT_TAG",
    "ENV_PREFIX",
    "configure",
    "debug",
    "debug_line",
    "error",
    "error_line",
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
