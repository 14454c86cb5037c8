"""
Metrics collection for arealog.

Implements a minimal set of Prometheus-compatible counters for the emission
and capture paths.

Design goals:
- No global state; instances are owned by a ``LoggingService``
- Safe no-op exporter behavior when metrics are disabled by settings
- In-memory counters are always kept so tests can assert on them
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

from prometheus_client import CollectorRegistry, Counter


@dataclass
class LoggingMetrics:
    """Captured runtime counters for quick assertions in tests."""

    lines_emitted: int = 0
    capture_events: int = 0
    capture_errors: int = 0


class MetricsCollector:
    """Service-scoped metrics collector.

    Emission happens on arbitrary caller threads, so the in-memory state is
    guarded by a plain ``threading.Lock``.
    """

    def __init__(self, *, enabled: bool = False) -> None:
        self._enabled = bool(enabled)
        self._lock = threading.Lock()
        self._state = LoggingMetrics()

        self._c_lines: Any | None = None
        self._c_capture_events: Any | None = None
        self._c_capture_errors: Any | None = None
        self._registry: CollectorRegistry | None = None

        if self._enabled:
            # Isolated registry to avoid global duplication across services
            self._registry = CollectorRegistry()
            self._c_lines = Counter(
                "arealog_lines_emitted_total",
                "Total number of rendered lines written to sinks",
                ["area", "level"],
                registry=self._registry,
            )
            self._c_capture_events = Counter(
                "arealog_capture_events_total",
                "Total number of events published to the capture subscriber",
                ["key"],
                registry=self._registry,
            )
            self._c_capture_errors = Counter(
                "arealog_capture_errors_total",
                "Total number of failed downstream writes inside capture tees",
                registry=self._registry,
            )

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def registry(self) -> CollectorRegistry | None:
        """Expose the isolated Prometheus registry when enabled."""
        return self._registry

    def record_line(self, *, area: str, level: str) -> None:
        with self._lock:
            self._state.lines_emitted += 1
        if self._c_lines is not None:
            self._c_lines.labels(area=area.lower(), level=level).inc()

    def record_capture_event(self, *, key: str) -> None:
        with self._lock:
            self._state.capture_events += 1
        if self._c_capture_events is not None:
            self._c_capture_events.labels(key=key).inc()

    def record_capture_error(self) -> None:
        with self._lock:
            self._state.capture_errors += 1
        if self._c_capture_errors is not None:
            self._c_capture_errors.inc()

    def snapshot(self) -> LoggingMetrics:
        with self._lock:
            return LoggingMetrics(
                lines_emitted=self._state.lines_emitted,
                capture_events=self._state.capture_events,
                capture_errors=self._state.capture_errors,
            )
