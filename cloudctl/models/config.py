"""Dashboard configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from cloudctl.constants.defaults import (
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from cloudctl.constants.enums import ThemeName
from cloudctl.constants.limits import REFRESH_INTERVAL_MIN
from cloudctl.constants.timeouts import DASHBOARD_REQUEST_TIMEOUT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when the contexts file fails to load."""


class FilterContext(BaseModel):
    """Read-only resource scope applied to every fetch."""

    model_config = ConfigDict(frozen=True)

    tenant: str = ""
    partition: str = ""
    purpose: str = ""

    def header_text(self) -> str:
        """Render the filter header paragraph text."""
        return (
            f"Tenant={self.tenant}\n"
            f"Partition={self.partition}\n"
            f"Purpose={self.purpose}"
        )


class DashboardConfig(BaseModel):
    """Dashboard settings, built once at startup and passed down explicitly."""

    model_config = ConfigDict(frozen=True)

    filters: FilterContext = FilterContext()
    color_theme: str = THEME_DEFAULT
    initial_tab: str | None = None  # None selects the first tab
    refresh_interval: float = REFRESH_INTERVAL_DEFAULT  # seconds
    request_timeout: float = DASHBOARD_REQUEST_TIMEOUT  # seconds

    @field_validator("color_theme")
    @classmethod
    def _validate_color_theme(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {theme.value for theme in ThemeName}:
            raise ValueError(f"unknown theme: {value}")
        return normalized

    @field_validator("refresh_interval")
    @classmethod
    def _validate_refresh_interval(cls, value: float) -> float:
        if value < REFRESH_INTERVAL_MIN:
            raise ValueError(
                f"refresh interval must be at least {REFRESH_INTERVAL_MIN}s"
            )
        return value

    @field_validator("request_timeout")
    @classmethod
    def _validate_request_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request timeout must be positive")
        return value


__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "DashboardConfig",
    "FilterContext",
]
