"""Environment variable adapter.

Purpose
-------
Let operators tune the printer (``LIB_PRETTY_LOG_LEVEL=none``,
``LIB_PRETTY_LOG_METHOD_COUNT=0``) without touching application code.

Key behaviours
--------------
* Enforces a configurable prefix (``default_env_prefix``) so only relevant keys
  are captured.
* Strips the prefix and lower-cases the remainder (``..._METHOD_COUNT`` →
  ``method_count``).
* Performs light type coercion for common scalar types (bools, ints, floats,
  ``null``/``none``); ``none`` stays a string for the ``level`` key because it
  names the disabled log level.
* Emits structured diagnostics via :mod:`lib_pretty_log.observability`.
"""

from __future__ import annotations

import os
from typing import Mapping

from ...observability import log_debug

_VERBATIM_KEYS = frozenset({"level", "log_level", "tag"})


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('lib-pretty-log')
    'LIB_PRETTY_LOG'
    """

    return slug.replace("-", "_").upper()


class DefaultEnvLoader:
    """Load environment variables that belong to the printer namespace."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        """

        self._environ = environ if environ is not None else os.environ

    def load(self, prefix: str) -> dict[str, object]:
        """Return settings variables carrying *prefix*, keyed without it.

        Examples
        --------
        >>> env = {
        ...     'DEMO_LEVEL': 'none',
        ...     'DEMO_METHOD_COUNT': '3',
        ...     'DEMO_SHOW_THREAD_INFO': 'false',
        ...     'OTHER': 'ignored',
        ... }
        >>> DefaultEnvLoader(environ=env).load('DEMO')
        {'level': 'none', 'method_count': 3, 'show_thread_info': False}
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        collected: dict[str, object] = {}
        for key, value in sorted(self._environ.items()):
            if prefix and not key.startswith(prefix):
                continue
            stripped = key[len(prefix) :].lower() if prefix else key.lower()
            if not stripped:
                continue
            collected[stripped] = value if stripped in _VERBATIM_KEYS else _coerce(value)
        log_debug("env_variables_loaded", kind="env", keys=sorted(collected.keys()))
        return collected


def _coerce(value: str) -> object:
    """Coerce textual environment values to Python primitives where possible.

    Examples
    --------
    >>> _coerce('true'), _coerce('10'), _coerce('3.5'), _coerce('hello')
    (True, 10, 3.5, 'hello')
    """

    lowered = value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    try:
        if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
            return int(value)
        return float(value)
    except ValueError:
        return value
