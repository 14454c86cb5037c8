"""
Pytest fixtures for arealog.

Register with ``pytest_plugins = ("arealog.testing.fixtures",)``.
"""

from __future__ import annotations

import queue
from collections.abc import Generator

import pytest

from ..core import diagnostics
from ..core.service import LoggingService
from .sinks import MemorySink, RecordingEventSink


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def secondary_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def logging_service(
    memory_sink: MemorySink, secondary_sink: MemorySink
) -> LoggingService:
    """Service writing console output to ``memory_sink``."""
    return LoggingService(console=memory_sink, secondary=secondary_sink)


@pytest.fixture
def event_queue() -> queue.Queue:
    return queue.Queue()


@pytest.fixture
def recording_events() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def internal_diagnostics() -> Generator[None, None, None]:
    """Enable internal diagnostics for the duration of a test."""
    diagnostics.configure(enabled=True)
    yield
    diagnostics._internal_logging_enabled = None
