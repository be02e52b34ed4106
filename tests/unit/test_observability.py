"""Unit tests for the library's own diagnostics in ``observability``.

Validates the null handler, context binding, and event construction the
printer and adapters rely on.
"""

from __future__ import annotations

import logging

import pytest

from lib_pretty_log import bind_context, get_logger
from lib_pretty_log.observability import CONTEXT, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_context_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Diagnostics should include the bound context and the event's own fields."""

    caplog.set_level(logging.INFO, logger="lib_pretty_log")
    bind_context({"job": "nightly"})
    try:
        log_info("settings_applied", kind="configure")
    finally:
        bind_context(None)
    record = caplog.records[-1]
    assert record.name == "lib_pretty_log"
    assert getattr(record, "context") == {"job": "nightly", "kind": "configure"}


def test_bind_context_clears() -> None:
    bind_context({"job": "temp"})
    bind_context(None)
    assert CONTEXT.get() is None


def test_make_event_merges_optional_payload() -> None:
    assert make_event("json", {"error": "bad"}) == {"kind": "json", "error": "bad"}
    assert make_event("xml") == {"kind": "xml"}
