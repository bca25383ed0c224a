"""Configuration package."""

from networth.config.settings import (
    AppSettings,
    ForecastSettings,
    ReportSettings,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "ForecastSettings",
    "ReportSettings",
    "Settings",
    "StorageSettings",
    "get_settings",
    "validate_all_settings",
]
