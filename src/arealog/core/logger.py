"""
Area-bound loggers.

A ``Logger`` renders lines as::

    [area  ] LEVEL yyyy/mm/dd hh:mm:ss message

and writes them to the channel of the call's severity. TRACE..INFO channels
write to the console sink; WARN, ERROR and FATAL channels also write to the
secondary sink. Channel writers are replaceable, which is how the capture
bridge tees WARN/ERROR/FATAL output.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from ..plugins.sinks import FanOutWriter
from . import diagnostics
from .levels import PERSISTED_LEVELS, Level

if TYPE_CHECKING:
    from ..metrics.metrics import MetricsCollector
    from ..plugins.sinks import Writer

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
DEFAULT_AREA_PADDING = 6


def pad_area(area: str, width: int) -> str:
    """Right-pad ``area`` with spaces to ``width``; longer names are kept whole."""
    return area.ljust(width)


def _timestamp() -> str:
    return time.strftime(TIMESTAMP_FORMAT, time.localtime())


class Channel:
    """Holds the writer for one severity."""

    __slots__ = ("writer",)

    def __init__(self, writer: Writer) -> None:
        self.writer = writer

    def write(self, data: bytes) -> int:
        return self.writer.write(data)


class LeveledSink:
    """Threshold plus one ``Channel`` per severity.

    ``threshold`` is set once at construction and afterwards only by
    ``LoggingService.reconfigure``.
    """

    def __init__(
        self,
        *,
        threshold: Level,
        console: Writer,
        secondary: Writer,
    ) -> None:
        self.threshold = threshold
        self.console = console
        self.secondary = secondary
        self._channels: dict[Level, Channel] = {}
        for level in Level:
            if level in PERSISTED_LEVELS:
                self._channels[level] = Channel(FanOutWriter(console, secondary))
            else:
                self._channels[level] = Channel(console)

    def channel(self, level: Level) -> Channel:
        return self._channels[level]


class Logger:
    """Leveled logger bound to a single area.

    Instances are created by ``LoggerRegistry.get_or_create`` and live for the
    lifetime of their service.
    """

    def __init__(
        self,
        area: str,
        *,
        threshold: Level,
        console: Writer,
        secondary: Writer,
        padding: int = DEFAULT_AREA_PADDING,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._area = area
        self._prefix = f"[{pad_area(area, padding)}] "
        self._sink = LeveledSink(
            threshold=threshold, console=console, secondary=secondary
        )
        self._metrics = metrics

    @property
    def name(self) -> str:
        return self._area

    @property
    def area(self) -> str:
        return self._area

    @property
    def sink(self) -> LeveledSink:
        return self._sink

    @property
    def threshold(self) -> Level:
        return self._sink.threshold

    def _set_threshold(self, level: Level) -> None:
        # Called only by LoggingService.reconfigure under the registry lock
        self._sink.threshold = level

    def is_enabled_for(self, level: Level) -> bool:
        return level >= self._sink.threshold

    def channel(self, level: Level) -> Channel:
        return self._sink.channel(level)

    def render(self, level: Level, message: str) -> bytes:
        line = f"{self._prefix}{level.label} {_timestamp()} {message}"
        if not line.endswith("\n"):
            line += "\n"
        return line.encode("utf-8", errors="replace")

    def log(self, level: Level, msg: Any, *args: Any) -> None:
        if level < self._sink.threshold:
            return
        try:
            message = str(msg) % args if args else str(msg)
        except Exception as e:
            diagnostics.warn(
                "logger",
                "format failed",
                area=self._area,
                level=level.label,
                reason=type(e).__name__,
                detail=str(e),
            )
            message = f"{msg} {args!r}"
        data = self.render(level, message)
        try:
            self._sink.channel(level).write(data)
        except Exception as e:
            # Sink failures never reach the caller
            diagnostics.warn(
                "logger",
                "sink write failed",
                area=self._area,
                level=level.label,
                reason=type(e).__name__,
                detail=str(e),
            )
            return
        if self._metrics is not None:
            self._metrics.record_line(area=self._area, level=level.label)

    def trace(self, msg: Any, *args: Any) -> None:
        self.log(Level.TRACE, msg, *args)

    def debug(self, msg: Any, *args: Any) -> None:
        self.log(Level.DEBUG, msg, *args)

    def info(self, msg: Any, *args: Any) -> None:
        self.log(Level.INFO, msg, *args)

    def warn(self, msg: Any, *args: Any) -> None:
        self.log(Level.WARN, msg, *args)

    warning = warn

    def error(self, msg: Any, *args: Any) -> None:
        self.log(Level.ERROR, msg, *args)

    def fatal(self, msg: Any, *args: Any) -> None:
        """Log at FATAL. Does not terminate the process."""
        self.log(Level.FATAL, msg, *args)

    def __repr__(self) -> str:
        return f"Logger(area={self._area!r}, threshold={self.threshold.label})"
