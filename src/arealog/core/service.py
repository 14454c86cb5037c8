"""
The logging service object.

``LoggingService`` composes the threshold policy, the logger registry, the
capture bridge and metrics. Construct one at process start and pass it to
every call site that needs logging; there is no module-level instance.

The policy is private and loggers have no public threshold setter:
``reconfigure`` is the only way to change thresholds, so every existing
logger always matches ``resolve()``.

Example:
    service = LoggingService.from_settings(LoggingSettings())
    log = service.get_logger("site")
    log.error("charger offline")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Mapping

from ..metrics.metrics import MetricsCollector
from . import diagnostics
from .capture import CaptureBridge, EventSink
from .levels import Level
from .logger import DEFAULT_AREA_PADDING, Logger
from .registry import LoggerRegistry
from .settings import LoggingSettings
from .thresholds import ThresholdPolicy

if TYPE_CHECKING:
    from ..plugins.sinks import Writer


class LoggingService:
    """Explicitly owned replacement for process-wide logging state."""

    def __init__(
        self,
        *,
        console: Writer | None = None,
        secondary: Writer | None = None,
        padding: int = DEFAULT_AREA_PADDING,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._metrics = metrics if metrics is not None else MetricsCollector()
        self._policy = ThresholdPolicy()
        self._registry = LoggerRegistry(
            self._policy,
            console=console,
            secondary=secondary,
            padding=padding,
            metrics=self._metrics,
        )
        self._capture = CaptureBridge(self._registry, metrics=self._metrics)

    @classmethod
    def from_settings(
        cls,
        settings: LoggingSettings | None = None,
        *,
        console: Writer | None = None,
        secondary: Writer | None = None,
    ) -> LoggingService:
        """Build a service and apply the configured thresholds.

        Raises:
            ConfigurationError: If a configured level is invalid.
        """
        cfg = settings or LoggingSettings()
        diagnostics.configure(enabled=cfg.internal_logging_enabled)
        service = cls(
            console=console,
            secondary=secondary,
            padding=cfg.area_padding,
            metrics=MetricsCollector(enabled=cfg.enable_metrics),
        )
        service.reconfigure(cfg.default_level, cfg.areas)
        return service

    @property
    def console_threshold(self) -> Level:
        """Global default for areas without an override."""
        return self._policy.console_threshold

    @property
    def file_threshold(self) -> Level:
        return self._policy.file_threshold

    @property
    def registry(self) -> LoggerRegistry:
        return self._registry

    @property
    def capture(self) -> CaptureBridge:
        return self._capture

    @property
    def metrics(self) -> MetricsCollector:
        return self._metrics

    def get_logger(self, area: str) -> Logger:
        return self._registry.get_or_create(area)

    def for_each(self, visit: Callable[[str, Logger], None]) -> None:
        self._registry.for_each(visit)

    def resolve(self, area: str) -> Level:
        return self._policy.resolve(area)

    def reconfigure(
        self,
        default_level: str,
        area_levels: Mapping[str, str] | None = None,
    ) -> None:
        """Apply new thresholds to the policy and every existing logger.

        Serialized against logger creation by the registry lock. On
        ``ConfigurationError`` nothing is changed.
        """
        with self._registry.lock:
            self._policy.reconfigure(default_level, area_levels)
            policy = self._policy
            self._registry.for_each(
                lambda area, logger: logger._set_threshold(policy.resolve(area))
            )
        diagnostics.debug(
            "config",
            "thresholds reconfigured",
            default=self._policy.console_threshold.label,
            overrides={k: v.label for k, v in self._policy.overrides.items()},
        )

    def install_capture(self, event_sink: EventSink) -> None:
        """Tee WARN/ERROR/FATAL output of existing loggers into ``event_sink``."""
        self._capture.install(event_sink)
