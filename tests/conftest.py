"""Shared fixtures: recording backends, fixed clocks, fake transports."""

from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_syslogger.application.wrappers.nowait import shutdown_shared_executor
from tests.fakes import FakeTransports, FixedClock, InlineExecutor, RecordingBackend


@pytest.fixture
def recorder() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def fake_transports() -> FakeTransports:
    return FakeTransports()


@pytest.fixture
def inline_executor() -> InlineExecutor:
    return InlineExecutor()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture(autouse=True)
def _stop_shared_executor() -> Iterator[None]:
    yield
    shutdown_shared_executor(wait=True)
