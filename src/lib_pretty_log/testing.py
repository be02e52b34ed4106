"""Testing support that keeps printer output observable and predictable.

Purpose
    Provide an in-memory sink so test suites (ours and those of applications
    using the library) can assert on exactly what the printer emitted.

Contents
    - ``SinkRecord``: one emitted ``(severity, tag, line)`` triple.
    - ``RecordingSink``: thread-safe sink that appends every record to a list.

System Integration
    Implements :class:`lib_pretty_log.application.ports.Sink`; pass it to
    :class:`lib_pretty_log.Printer` or install it with
    :func:`lib_pretty_log.set_sink`.
"""

from __future__ import annotations

import threading
from typing import NamedTuple

from .domain.settings import Severity


class SinkRecord(NamedTuple):
    """A single line as it reached the sink."""

    severity: Severity
    tag: str
    line: str


class RecordingSink:
    """Collect emitted lines in memory.

    Examples
    --------
    >>> sink = RecordingSink()
    >>> sink.emit(Severity.INFO, "APP", "hello")
    >>> sink.records
    [SinkRecord(severity=<Severity.INFO: 4>, tag='APP', line='hello')]
    >>> sink.lines(Severity.ERROR)
    []
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[SinkRecord] = []

    def emit(self, severity: Severity, tag: str, line: str) -> None:
        with self._lock:
            self._records.append(SinkRecord(Severity(severity), tag, line))

    @property
    def records(self) -> list[SinkRecord]:
        """Return a snapshot copy of everything recorded so far."""

        with self._lock:
            return list(self._records)

    def lines(self, severity: Severity | None = None) -> list[str]:
        """Return recorded lines, optionally only those at *severity*."""

        return [record.line for record in self.records if severity is None or record.severity == severity]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
