"""
Error types raised by arealog.

The library never terminates the process on its own. Configuration errors are
raised to the caller, and the top-level program decides whether to exit.
"""

from __future__ import annotations


class ArealogError(Exception):
    """Base class for all arealog errors."""


class ConfigurationError(ArealogError, ValueError):
    """Raised when a level or threshold configuration is invalid.

    Subclasses ``ValueError`` so pydantic validators can surface it as a
    regular validation failure.
    """

    def __init__(self, message: str, *, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value
