"""
Internal diagnostics for non-fatal arealog errors.

Diagnostics are structured JSON lines written to stderr, never to the log
sinks they describe. They are off by default and enabled through
``LoggingSettings.internal_logging_enabled`` (env:
``AREALOG_INTERNAL_LOGGING_ENABLED``). The setting is read lazily once and
cached; tests reset ``_internal_logging_enabled`` to ``None``.
"""

from __future__ import annotations

import sys
import time
from typing import Any

import orjson

_internal_logging_enabled: bool | None = None


def configure(*, enabled: bool) -> None:
    """Set the diagnostics switch explicitly, bypassing the settings lookup."""
    global _internal_logging_enabled
    _internal_logging_enabled = bool(enabled)


def is_enabled() -> bool:
    global _internal_logging_enabled
    if _internal_logging_enabled is None:
        try:
            from .settings import LoggingSettings

            _internal_logging_enabled = bool(
                LoggingSettings().internal_logging_enabled
            )
        except Exception:
            _internal_logging_enabled = False
    return _internal_logging_enabled


def _emit(level: str, component: str, message: str, fields: dict[str, Any]) -> None:
    payload = {
        "timestamp": time.time(),
        "level": level,
        "logger": "arealog.internal",
        "component": component,
        "message": message,
        **fields,
    }
    try:
        data = orjson.dumps(payload, default=str)
        stream = sys.stderr.buffer
        stream.write(data + b"\n")
        stream.flush()
    except Exception:
        # Diagnostics must never break the caller
        return None


def warn(component: str, message: str, **fields: Any) -> None:
    """Emit a WARN diagnostic for ``component`` when enabled."""
    if is_enabled():
        _emit("WARN", component, message, fields)


def debug(component: str, message: str, **fields: Any) -> None:
    """Emit a DEBUG diagnostic for ``component`` when enabled."""
    if is_enabled():
        _emit("DEBUG", component, message, fields)
