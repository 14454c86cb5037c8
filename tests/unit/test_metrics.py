from __future__ import annotations

from arealog.core.service import LoggingService
from arealog.metrics.metrics import MetricsCollector
from arealog.testing import MemorySink, RecordingEventSink


def test_disabled_collector_keeps_in_memory_counts() -> None:
    metrics = MetricsCollector()
    metrics.record_line(area="foo", level="ERROR")
    metrics.record_capture_event(key="error")
    metrics.record_capture_error()

    snap = metrics.snapshot()
    assert not metrics.is_enabled
    assert metrics.registry is None
    assert (snap.lines_emitted, snap.capture_events, snap.capture_errors) == (1, 1, 1)


def test_enabled_collector_exports_prometheus_counters() -> None:
    metrics = MetricsCollector(enabled=True)
    service = LoggingService(console=MemorySink(), metrics=metrics)
    service.reconfigure("warn")
    logger = service.get_logger("Foo")
    sink = RecordingEventSink()
    service.install_capture(sink)

    logger.warn("w")
    logger.error("e")
    logger.info("suppressed")

    registry = metrics.registry
    assert registry is not None
    assert (
        registry.get_sample_value(
            "arealog_lines_emitted_total", {"area": "foo", "level": "WARN"}
        )
        == 1.0
    )
    assert (
        registry.get_sample_value(
            "arealog_capture_events_total", {"key": "error"}
        )
        == 1.0
    )
    assert metrics.snapshot().lines_emitted == 2


def test_collectors_use_isolated_registries() -> None:
    a = MetricsCollector(enabled=True)
    b = MetricsCollector(enabled=True)
    assert a.registry is not b.registry
