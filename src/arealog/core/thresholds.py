"""Per-area threshold resolution.

``ThresholdPolicy`` owns the global default pair and the per-area override
table. Override keys are always lower-cased, so every casing of an area name
resolves to the same threshold.
"""

from __future__ import annotations

from typing import Mapping

from .levels import Level, parse_level

# Initial global defaults before any reconfiguration
DEFAULT_CONSOLE_THRESHOLD = Level.ERROR
DEFAULT_FILE_THRESHOLD = Level.WARN


class ThresholdPolicy:
    """Resolve the effective threshold of an area.

    Writes happen only through ``reconfigure`` while the caller holds the
    registry lock. Reads are lock-free: each field is replaced by a single
    assignment, so readers see either the old or the new value.
    """

    def __init__(
        self,
        *,
        console_threshold: Level = DEFAULT_CONSOLE_THRESHOLD,
        file_threshold: Level = DEFAULT_FILE_THRESHOLD,
    ) -> None:
        self._console_threshold = console_threshold
        self._file_threshold = file_threshold
        self._overrides: dict[str, Level] = {}

    @property
    def console_threshold(self) -> Level:
        return self._console_threshold

    @property
    def file_threshold(self) -> Level:
        return self._file_threshold

    @property
    def overrides(self) -> dict[str, Level]:
        """Copy of the override table, keyed by lower-cased area."""
        return dict(self._overrides)

    def resolve(self, area: str) -> Level:
        return self._overrides.get(area.lower(), self._console_threshold)

    def reconfigure(
        self,
        default_level: str,
        area_levels: Mapping[str, str] | None = None,
    ) -> None:
        """Replace the global default and merge per-area overrides.

        Console and file thresholds are both set to ``default_level``; they are
        not independently configurable. Overrides are merged into the existing
        table. Everything is parsed before any state changes, so an invalid
        level leaves the policy untouched.

        Raises:
            ConfigurationError: If any level name is invalid.
        """
        default = parse_level(default_level)
        parsed = {
            area.lower(): parse_level(level)
            for area, level in (area_levels or {}).items()
        }

        self._console_threshold = default
        self._file_threshold = default
        if parsed:
            overrides = dict(self._overrides)
            overrides.update(parsed)
            self._overrides = overrides
