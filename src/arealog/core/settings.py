"""
Configuration models for arealog using Pydantic v2 Settings.

Settings are validated once at startup. Level names go through the same
grammar as ``LoggingService.reconfigure`` so a bad value fails at load time
instead of at first reconfiguration.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import (  # type: ignore[import-not-found]
    BaseSettings,
    SettingsConfigDict,
)

from .levels import parse_level
from .logger import DEFAULT_AREA_PADDING


class LoggingSettings(BaseSettings):
    """Startup configuration for a ``LoggingService``."""

    default_level: str = Field(
        default="ERROR",
        description="Default threshold for every area without an override",
    )
    areas: dict[str, str] = Field(
        default_factory=dict,
        description="Per-area threshold overrides, keyed by area name",
    )
    area_padding: int = Field(
        default=DEFAULT_AREA_PADDING,
        ge=0,
        description="Minimum display width of the area column",
    )
    internal_logging_enabled: bool = Field(
        default=False,
        description="Emit structured diagnostics for internal errors to stderr",
    )
    enable_metrics: bool = Field(
        default=False,
        description="Enable Prometheus-compatible metrics",
    )

    model_config = SettingsConfigDict(
        env_prefix="AREALOG_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("default_level")
    @classmethod
    def _validate_default_level(cls, value: str) -> str:
        return parse_level(value).name

    @field_validator("areas")
    @classmethod
    def _validate_area_levels(cls, value: dict[str, str]) -> dict[str, str]:
        return {area: parse_level(level).name for area, level in value.items()}
