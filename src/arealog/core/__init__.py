from .capture import CaptureBridge, CaptureEvent, EventSink, TeeWriter
from .errors import ArealogError, ConfigurationError
from .levels import Level, parse_level
from .logger import Logger, pad_area
from .registry import LoggerRegistry
from .service import LoggingService
from .settings import LoggingSettings
from .thresholds import ThresholdPolicy

__all__ = [
    "ArealogError",
    "CaptureBridge",
    "CaptureEvent",
    "ConfigurationError",
    "EventSink",
    "Level",
    "Logger",
    "LoggerRegistry",
    "LoggingService",
    "LoggingSettings",
    "TeeWriter",
    "ThresholdPolicy",
    "pad_area",
    "parse_level",
]
