"""Printer settings and severity vocabulary.

Purpose
-------
Hold the mutable configuration read on every log call: the log-level
threshold, the default number of call-site frames rendered in a header, and
whether header lines mention the calling thread.

Contents
--------
* :class:`Severity` – the six sink priorities.
* :class:`LogLevel` – threshold applied before any formatting work; ``NONE``
  disables output entirely.
* :class:`Settings` – lock-protected holder with chaining setters.
* :data:`DEFAULT_METHOD_COUNT` – frames rendered when nothing else is set.

System Role
-----------
One :class:`Settings` instance belongs to each
:class:`lib_pretty_log.application.printer.Printer`; the package facade owns
the process-wide printer and therefore the process-wide settings.
"""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Any, Final, Mapping

from .errors import ConfigError

DEFAULT_METHOD_COUNT: Final[int] = 2


class Severity(IntEnum):
    """Sink priorities, numbered like the platform log API."""

    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    ASSERT = 7


class LogLevel(IntEnum):
    """Threshold compared against :class:`Severity` on every call.

    ``FULL`` lets everything through and ``NONE`` is the disabled sentinel.

    Examples
    --------
    >>> LogLevel.parse("warn") is LogLevel.WARN
    True
    >>> Severity.INFO >= LogLevel.WARN
    False
    """

    FULL = 0
    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    ASSERT = 7
    NONE = 100

    @classmethod
    def parse(cls, value: Any) -> "LogLevel":
        """Return the member named or numbered by *value*.

        Raises
        ------
        ConfigError
            When *value* names no member.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARNING":
                name = "WARN"
            try:
                return cls[name]
            except KeyError:
                raise ConfigError(f"Unknown log level: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ConfigError(f"Unknown log level: {value!r}") from None
        raise ConfigError(f"Unknown log level: {value!r}")


class Settings:
    """Mutable, thread-safe printer configuration.

    Setters validate eagerly and return ``self`` so calls chain off
    :func:`lib_pretty_log.init`.

    Examples
    --------
    >>> settings = Settings().set_method_count(1).set_log_level(LogLevel.INFO)
    >>> settings.method_count, settings.log_level.name
    (1, 'INFO')
    >>> Settings().set_method_count(-1)
    Traceback (most recent call last):
    ...
    lib_pretty_log.domain.errors.ConfigError: methodCount cannot be negative: -1
    """

    def __init__(
        self,
        *,
        log_level: LogLevel = LogLevel.FULL,
        method_count: int = DEFAULT_METHOD_COUNT,
        show_thread_info: bool = True,
    ) -> None:
        self._lock = threading.Lock()
        self._log_level = LogLevel.parse(log_level)
        self._method_count = _validate_method_count(method_count)
        self._show_thread_info = bool(show_thread_info)

    @property
    def log_level(self) -> LogLevel:
        with self._lock:
            return self._log_level

    @property
    def method_count(self) -> int:
        with self._lock:
            return self._method_count

    @property
    def show_thread_info(self) -> bool:
        with self._lock:
            return self._show_thread_info

    def set_log_level(self, level: LogLevel | str | int) -> "Settings":
        parsed = LogLevel.parse(level)
        with self._lock:
            self._log_level = parsed
        return self

    def set_method_count(self, count: int) -> "Settings":
        validated = _validate_method_count(count)
        with self._lock:
            self._method_count = validated
        return self

    def set_show_thread_info(self, flag: bool) -> "Settings":
        with self._lock:
            self._show_thread_info = bool(flag)
        return self

    def reset(self) -> "Settings":
        """Restore the defaults (full output, two frames, thread info shown)."""

        with self._lock:
            self._log_level = LogLevel.FULL
            self._method_count = DEFAULT_METHOD_COUNT
            self._show_thread_info = True
        return self

    def apply(self, values: Mapping[str, Any]) -> "Settings":
        """Apply recognised keys from a configuration mapping.

        Why
        ----
        Environment and file adapters deliver loosely typed mappings; this is
        the single place that turns them into validated settings.

        What
        ----
        Reads ``log_level`` (or ``level``), ``method_count`` and
        ``show_thread_info``. Other keys are ignored. All values are validated
        before any of them is stored.

        Examples
        --------
        >>> Settings().apply({"level": "none", "method_count": "0"}).log_level.name
        'NONE'
        """

        level = values.get("log_level", values.get("level"))
        count = values.get("method_count")
        show = values.get("show_thread_info")

        parsed_level = LogLevel.parse(level) if level is not None else None
        parsed_count = _validate_method_count(_coerce_int(count)) if count is not None else None
        parsed_show = _coerce_bool(show) if show is not None else None

        with self._lock:
            if parsed_level is not None:
                self._log_level = parsed_level
            if parsed_count is not None:
                self._method_count = parsed_count
            if parsed_show is not None:
                self._show_thread_info = parsed_show
        return self

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"Settings(log_level={self._log_level.name}, method_count={self._method_count}, "
                f"show_thread_info={self._show_thread_info})"
            )


def _validate_method_count(count: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise ConfigError(f"methodCount must be an integer: {count!r}")
    if count < 0:
        raise ConfigError(f"methodCount cannot be negative: {count}")
    return count


def _coerce_int(value: Any) -> Any:
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lstrip("-").isdigit():
            return int(stripped)
    return value


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "false", "1", "0", "yes", "no", "on", "off"}:
        return value.strip().lower() in {"true", "1", "yes", "on"}
    if isinstance(value, int):
        return bool(value)
    raise ConfigError(f"show_thread_info must be a boolean: {value!r}")
