"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the printer needs from the outside world so
it can orchestrate output without depending on concrete implementations.

Contents
--------
* :class:`Sink` – accepts one finished line with its severity and tag.
* :class:`ConfigLoader` – parses a structured configuration artifact.
* :class:`EnvLoader` – materialises prefixed environment variables.

System Role
-----------
These protocols enforce Dependency Inversion (DIP). Adapters under
:mod:`lib_pretty_log.adapters` and :class:`lib_pretty_log.testing.RecordingSink`
implement them; the printer and the facade only ever see the abstraction.
"""

from __future__ import annotations

from typing import Mapping, Protocol

from ..domain.settings import Severity


class Sink(Protocol):
    """Write a single line of text for *tag* at *severity*.

    Why
    ----
    Keep the platform log API (console, stdlib logging, an in-memory buffer)
    out of the formatting pipeline.

    Contract
    --------
    ``line`` never contains a line separator. The printer calls ``emit`` while
    holding its lock, so implementations should not block for long.
    """

    def emit(self, severity: Severity, tag: str, line: str) -> None:
        """Write *line*."""


class ConfigLoader(Protocol):
    """Parse a structured configuration file into a mapping."""

    def load(self, path: str) -> Mapping[str, object]:
        """Read *path* and return a mapping or raise ``InvalidFormat``."""


class EnvLoader(Protocol):
    """Translate prefixed environment variables into a flat settings mapping."""

    def load(self, prefix: str) -> Mapping[str, object]:
        """Return variables that match *prefix* with the prefix stripped."""
