"""Registry of area loggers.

Exactly one ``Logger`` exists per distinct area string. The registry key is
the area as given (case preserved); threshold matching is case-insensitive
and handled by ``ThresholdPolicy``.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Callable, Iterator

from ..plugins.sinks import ConsoleSink, DiscardSink
from .logger import DEFAULT_AREA_PADDING, Logger

if TYPE_CHECKING:
    from ..metrics.metrics import MetricsCollector
    from ..plugins.sinks import Writer
    from .thresholds import ThresholdPolicy


class LoggerRegistry:
    """Get-or-create mapping from area name to ``Logger``.

    ``lock`` is re-entrant and shared with reconfiguration, which holds it
    while walking every logger.
    """

    def __init__(
        self,
        policy: ThresholdPolicy,
        *,
        console: Writer | None = None,
        secondary: Writer | None = None,
        padding: int = DEFAULT_AREA_PADDING,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._policy = policy
        self._console = console if console is not None else ConsoleSink()
        self._secondary = secondary if secondary is not None else DiscardSink()
        self._padding = padding
        self._metrics = metrics
        self._loggers: dict[str, Logger] = {}
        self.lock = threading.RLock()

    def get_or_create(self, area: str) -> Logger:
        with self.lock:
            logger = self._loggers.get(area)
            if logger is None:
                logger = Logger(
                    area,
                    threshold=self._policy.resolve(area),
                    console=self._console,
                    secondary=self._secondary,
                    padding=self._padding,
                    metrics=self._metrics,
                )
                self._loggers[area] = logger
            return logger

    def get(self, area: str) -> Logger | None:
        """Return the logger for ``area`` without creating one."""
        return self._loggers.get(area)

    def for_each(self, visit: Callable[[str, Logger], None]) -> None:
        """Call ``visit(area, logger)`` for a snapshot of the registry.

        Iteration order is unspecified.
        """
        with self.lock:
            snapshot = list(self._loggers.items())
        for area, logger in snapshot:
            visit(area, logger)

    def areas(self) -> list[str]:
        with self.lock:
            return list(self._loggers)

    def __len__(self) -> int:
        return len(self._loggers)

    def __contains__(self, area: object) -> bool:
        return area in self._loggers

    def __iter__(self) -> Iterator[Logger]:
        with self.lock:
            snapshot = list(self._loggers.values())
        return iter(snapshot)
