"""Shared fixtures: an isolated printer and a facade routed to memory."""

from __future__ import annotations

from typing import Iterator

import pytest

import lib_pretty_log
from lib_pretty_log import Printer, Settings
from lib_pretty_log.testing import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def printer(sink: RecordingSink) -> Printer:
    """Printer without headers so tests only see message lines."""

    return Printer(sink, tag="APP", settings=Settings(method_count=0))


@pytest.fixture
def facade_sink() -> Iterator[RecordingSink]:
    """Route the process-wide facade to memory and restore it afterwards."""

    recording = RecordingSink()
    lib_pretty_log.reset()
    lib_pretty_log.set_sink(recording)
    yield recording
    lib_pretty_log.reset()
