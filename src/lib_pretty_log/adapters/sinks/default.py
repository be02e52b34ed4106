"""Sink adapters writing finished lines to real destinations.

Purpose
-------
Bridge the printer's ``(severity, tag, line)`` output to the places Python
programs actually log to.

Contents
--------
* :data:`SEVERITY_TO_LOGGING` – severity to stdlib ``logging`` level mapping.
* :class:`LoggingSink` – forwards each line to a stdlib logger.
* :class:`StreamSink` – writes logcat-style lines to a text stream.

System Role
-----------
:class:`LoggingSink` is the default sink of the package facade; the CLI uses
:class:`StreamSink` so output lands on the terminal without any logging setup.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Final, Mapping, TextIO

from ...domain.settings import Severity

VERBOSE_LEVEL: Final[int] = 5
ASSERT_LEVEL: Final[int] = 60

logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")
logging.addLevelName(ASSERT_LEVEL, "ASSERT")

SEVERITY_TO_LOGGING: Final[Mapping[Severity, int]] = {
    Severity.VERBOSE: VERBOSE_LEVEL,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.ASSERT: ASSERT_LEVEL,
}

SEVERITY_LETTERS: Final[Mapping[Severity, str]] = {
    Severity.VERBOSE: "V",
    Severity.DEBUG: "D",
    Severity.INFO: "I",
    Severity.WARN: "W",
    Severity.ERROR: "E",
    Severity.ASSERT: "A",
}


class LoggingSink:
    """Forward lines to the stdlib :mod:`logging` machinery.

    Parameters
    ----------
    logger:
        Fixed logger to write to. When omitted, each line goes to the logger
        named after its tag, so handlers and levels can be configured per tag.

    The tag is always attached to the record as ``record.tag``.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger

    def emit(self, severity: Severity, tag: str, line: str) -> None:
        logger = self._logger if self._logger is not None else logging.getLogger(tag)
        logger.log(SEVERITY_TO_LOGGING[Severity(severity)], line, extra={"tag": tag})


class StreamSink:
    """Write ``"<letter>/<tag>: <line>"`` lines to a text stream.

    Examples
    --------
    >>> import io
    >>> buffer = io.StringIO()
    >>> StreamSink(buffer).emit(Severity.WARN, "APP", "low disk")
    >>> buffer.getvalue()
    'W/APP: low disk\\n'
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def emit(self, severity: Severity, tag: str, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        text = f"{SEVERITY_LETTERS[Severity(severity)]}/{tag}: {line}\n"
        with self._lock:
            stream.write(text)
            stream.flush()
