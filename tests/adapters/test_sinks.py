from __future__ import annotations

import io
import logging

import pytest

from lib_pretty_log import LoggingSink, Severity, StreamSink
from lib_pretty_log.adapters.sinks.default import ASSERT_LEVEL, VERBOSE_LEVEL


def test_logging_sink_uses_tag_as_logger_name(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(VERBOSE_LEVEL)
    LoggingSink().emit(Severity.WARN, "ORDERS", "slow query")
    record = caplog.records[-1]
    assert record.name == "ORDERS"
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "slow query"
    assert getattr(record, "tag") == "ORDERS"


@pytest.mark.parametrize(
    ("severity", "level", "name"),
    [(Severity.VERBOSE, VERBOSE_LEVEL, "VERBOSE"), (Severity.ASSERT, ASSERT_LEVEL, "ASSERT")],
)
def test_extra_severities_have_named_levels(
    caplog: pytest.LogCaptureFixture, severity: Severity, level: int, name: str
) -> None:
    caplog.set_level(VERBOSE_LEVEL)
    LoggingSink().emit(severity, "APP", "line")
    assert caplog.records[-1].levelno == level
    assert caplog.records[-1].levelname == name


def test_logging_sink_with_fixed_logger(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.fixed")
    caplog.set_level(logging.DEBUG, logger="tests.fixed")
    LoggingSink(logger).emit(Severity.DEBUG, "APP-net", "connected")
    record = caplog.records[-1]
    assert record.name == "tests.fixed"
    assert getattr(record, "tag") == "APP-net"


def test_stream_sink_writes_logcat_lines() -> None:
    buffer = io.StringIO()
    sink = StreamSink(buffer)
    sink.emit(Severity.VERBOSE, "APP", "v")
    sink.emit(Severity.ASSERT, "APP-db", "")
    assert buffer.getvalue() == "V/APP: v\nA/APP-db: \n"


def test_stream_sink_defaults_to_current_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    StreamSink().emit(Severity.ERROR, "APP", "boom")
    assert capsys.readouterr().err == "E/APP: boom\n"
