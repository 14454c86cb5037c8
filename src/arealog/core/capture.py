"""
Live capture of WARN/ERROR/FATAL log lines.

``CaptureBridge.install`` tees the WARN, ERROR and FATAL channels of every
logger registered at install time. Each tee writes the rendered line to the
original channel writer, then strips the ``[area] LEVEL timestamp`` prefix
and publishes the escaped body as a ``CaptureEvent`` to the subscriber.

Limitations kept on purpose:

- Loggers created after ``install`` are not captured.
- ``install`` is not idempotent. A second call tees the already-teed
  channels again and every tee publishes to the latest subscriber, so each
  captured line produces one event per install.
- Publishing is synchronous. A subscriber that does not drain (e.g. a full
  bounded ``queue.Queue``) blocks the logging call that produced the line.
- FATAL lines are published with the ``"error"`` key.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Protocol, runtime_checkable

import orjson

from . import diagnostics
from .levels import Level

if TYPE_CHECKING:
    from ..metrics.metrics import MetricsCollector
    from ..plugins.sinks import Writer
    from .registry import LoggerRegistry

# "[area  ] LEVEL yyyy/mm/dd hh:mm:ss "
PREFIX_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\[[a-zA-Z0-9-]+\s*\] \w+ .{19} "
)

CAPTURE_LABELS: Final[dict[Level, str]] = {
    Level.WARN: "warn",
    Level.ERROR: "error",
    Level.FATAL: "error",
}


@dataclass(frozen=True)
class CaptureEvent:
    """Structured event published for a captured line."""

    key: str
    val: str


@runtime_checkable
class EventSink(Protocol):
    """Send-only subscriber interface; ``queue.Queue`` satisfies it."""

    def put(self, item: Any) -> None:  # noqa: D401
        ...


def strip_prefix(line: str) -> str:
    """Remove a leading ``[area] LEVEL timestamp`` prefix, if present."""
    return PREFIX_PATTERN.sub("", line, count=1)


def escape_body(text: str) -> str:
    """Escape control and quote characters without adding surrounding quotes.

    Uses the JSON string encoder and drops exactly the outer quote pair it adds.
    """
    quoted = orjson.dumps(text).decode("utf-8")
    return quoted[1:-1]


def transform_line(data: bytes) -> str:
    """Turn a rendered line into the body published to the subscriber."""
    line = data.decode("utf-8", errors="replace")
    return escape_body(strip_prefix(line).strip())


class CaptureWriter:
    """Writer that publishes each line to the bridge's current subscriber."""

    def __init__(self, bridge: CaptureBridge, key: str) -> None:
        self._bridge = bridge
        self.key = key

    def write(self, data: bytes) -> int:
        self._bridge.publish(self.key, transform_line(data))
        return 0


class TeeWriter:
    """Forward each write to the original writer and a capture writer.

    ``write`` always returns ``0`` and never raises. A failure in either
    downstream is reported through diagnostics and the metrics counter only;
    the line is lost for that downstream and the caller is not told.
    """

    def __init__(
        self,
        original: Writer,
        capture: Writer,
        *,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.original = original
        self.capture = capture
        self._metrics = metrics

    def write(self, data: bytes) -> int:
        for target, writer in (("original", self.original), ("capture", self.capture)):
            try:
                writer.write(data)
            except Exception as e:
                if self._metrics is not None:
                    self._metrics.record_capture_error()
                diagnostics.warn(
                    "capture",
                    "tee downstream write failed",
                    target=target,
                    reason=type(e).__name__,
                    detail=str(e),
                )
        return 0


class CaptureBridge:
    """Republishes WARN/ERROR/FATAL lines of registered loggers as events."""

    def __init__(
        self,
        registry: LoggerRegistry,
        *,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._registry = registry
        self._metrics = metrics
        self._event_sink: EventSink | None = None
        self._installs = 0

    def install(self, event_sink: EventSink) -> None:
        """Tee every currently registered logger into ``event_sink``.

        Callers must install at most once; see the module docstring.
        """
        with self._registry.lock:
            if self._installs:
                diagnostics.warn(
                    "capture",
                    "capture installed again; existing tees are wrapped twice",
                    installs=self._installs + 1,
                )
            self._event_sink = event_sink
            self._installs += 1
            for logger in self._registry:
                for level, key in CAPTURE_LABELS.items():
                    channel = logger.channel(level)
                    channel.writer = TeeWriter(
                        channel.writer,
                        CaptureWriter(self, key),
                        metrics=self._metrics,
                    )

    def publish(self, key: str, text: str) -> None:
        sink = self._event_sink
        if sink is None:
            return
        # Blocks when the subscriber is not draining
        sink.put(CaptureEvent(key=key, val=text))
        if self._metrics is not None:
            self._metrics.record_capture_event(key=key)
