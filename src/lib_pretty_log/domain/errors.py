"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the printer, the configuration
adapters, and consuming applications. Only caller misuse surfaces as an
exception; malformed structured payloads are recovered inside the printer.

Contents
--------
* :class:`PrettyLogError` – umbrella base class for every library failure.
* :class:`ConfigError` – invalid tags, negative method counts, bad settings.
* :class:`InvalidFormat` – configuration artifacts that cannot be parsed.
* :class:`NotFound` – configuration files that do not exist.
* :class:`FormatError` – template/argument mismatches while formatting.
* :class:`PayloadParseError` – JSON/XML payloads that cannot be pretty-printed.

System Role
-----------
The printer raises :class:`ConfigError` and :class:`FormatError` straight to
the caller. :class:`PayloadParseError` never leaves
:meth:`lib_pretty_log.application.printer.Printer.json` or
:meth:`~lib_pretty_log.application.printer.Printer.xml`; it is converted into
an error-level log line instead.
"""

from __future__ import annotations


class PrettyLogError(Exception):
    """Base type for all exceptions emitted by ``lib_pretty_log``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class ConfigError(PrettyLogError):
    """Raised for invalid configuration: blank tags, negative method counts.

    Never silently corrected; the caller sees the failure immediately.
    """


class InvalidFormat(ConfigError):
    """Raised when a configuration artifact cannot be parsed into a mapping.

    Typical Sources
    ---------------
    Structured file loaders (:mod:`tomllib`, :mod:`json`, :mod:`yaml`).
    """


class NotFound(ConfigError):
    """Represents a configuration file that does not exist."""


class FormatError(PrettyLogError):
    """Raised when a message template and its arguments are incompatible.

    A malformed format call is a programming error, so it propagates out of
    the logging call rather than being logged as a warning.
    """


class PayloadParseError(PrettyLogError):
    """Raised when a JSON or XML payload cannot be parsed.

    Attributes
    ----------
    cause:
        Human-readable description of the parser failure.
    payload:
        The raw text that failed to parse.
    """

    def __init__(self, cause: str, payload: str) -> None:
        super().__init__(cause)
        self.cause = cause
        self.payload = payload

    def describe(self) -> str:
        """Return ``"<cause>\\n<payload>"`` as logged by the printer.

        Examples
        --------
        >>> PayloadParseError("Expecting value", "{bad").describe()
        'Expecting value\\n{bad'
        """

        return f"{self.cause}\n{self.payload}"
