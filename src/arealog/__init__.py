"""
Public entrypoints for arealog.

Area-scoped leveled loggers, live threshold reconfiguration and capture of
WARN/ERROR/FATAL lines as structured events.

Example:
    import queue
    from arealog import LoggingService

    service = LoggingService()
    service.reconfigure("warn", {"db": "debug"})
    log = service.get_logger("db")

    events = queue.Queue()
    service.install_capture(events)
    log.error("connection lost")
    events.get_nowait()  # CaptureEvent(key="error", val="connection lost")
"""

from __future__ import annotations

from ._version import __version__
from .context import bind_logger, logger_from_context
from .core.capture import CaptureEvent
from .core.errors import ArealogError, ConfigurationError
from .core.levels import Level, parse_level
from .core.logger import Logger
from .core.service import LoggingService
from .core.settings import LoggingSettings

__all__ = [
    "ArealogError",
    "CaptureEvent",
    "ConfigurationError",
    "Level",
    "Logger",
    "LoggingService",
    "LoggingSettings",
    "VERSION",
    "__version__",
    "bind_logger",
    "logger_from_context",
    "parse_level",
]

VERSION = __version__
