"""Severity levels and the level grammar.

Levels are ordered ``TRACE < DEBUG < INFO < WARN < ERROR < FATAL``. A level
name is accepted in any casing; every other token is a configuration error.

Example:
    >>> parse_level("warn")
    <Level.WARN: 3>
    >>> Level.ERROR >= Level.WARN
    True
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from .errors import ConfigurationError


class Level(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        """Upper-case name used in rendered lines."""
        return self.name


LEVEL_NAMES: Final[tuple[str, ...]] = tuple(level.name for level in Level)

# Levels whose lines are also written to the secondary sink
PERSISTED_LEVELS: Final[frozenset[Level]] = frozenset(
    {Level.WARN, Level.ERROR, Level.FATAL}
)


def parse_level(level: str) -> Level:
    """Convert a level name to a ``Level``.

    Args:
        level: Level name (case-insensitive).

    Returns:
        The matching ``Level``.

    Raises:
        ConfigurationError: If the name is not one of
            FATAL, ERROR, WARN, INFO, DEBUG, TRACE.
    """
    try:
        return Level[str(level).upper()]
    except KeyError:
        raise ConfigurationError(
            f"invalid log level {level!r}; expected one of {', '.join(LEVEL_NAMES)}",
            value=str(level),
        ) from None
