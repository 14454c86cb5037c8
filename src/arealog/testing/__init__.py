"""
Testing utilities for code that logs through arealog.

Example:
    from arealog import LoggingService
    from arealog.testing import MemorySink

    def test_warns():
        sink = MemorySink()
        service = LoggingService(console=sink)
        service.reconfigure("warn")
        service.get_logger("db").warn("slow query")
        assert sink.messages == ["slow query"]

Pytest fixtures live in ``arealog.testing.fixtures``; register them with
``pytest_plugins = ("arealog.testing.fixtures",)``.
"""

from .sinks import FailingSink, MemorySink, RecordingEventSink

__all__ = [
    "FailingSink",
    "MemorySink",
    "RecordingEventSink",
]
