"""
Configuration Management for the Net Worth Forecast Engine

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The engine functions take plain arguments; the services read these
settings and pass the values down.
"""

from datetime import date
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from networth.models.period import Granularity


class ForecastSettings(BaseSettings):
    """Forecast horizon and history window."""

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_",
        extra="ignore"
    )

    granularity: Granularity = Field(
        default=Granularity.QUARTER,
        description="Period size used for reconstruction and projection"
    )
    forecast_months: int = Field(
        default=60,
        ge=1,
        le=600,
        description="How far ahead to project, in months"
    )
    min_historical_periods: int = Field(
        default=4,
        ge=0,
        le=120,
        description="Minimum number of historical periods shown"
    )
    history_lookback_years: int = Field(
        default=5,
        ge=1,
        le=100,
        description="How far back balance history is loaded for a forecast"
    )


class ReportSettings(BaseSettings):
    """Historical report configuration."""

    model_config = SettingsConfigDict(
        env_prefix="REPORT_",
        extra="ignore"
    )

    granularity: Granularity = Field(
        default=Granularity.QUARTER,
        description="Period size of the report columns"
    )
    history_start: date = Field(
        default=date(2000, 1, 1),
        description="Earliest balance history loaded for reports"
    )


class StorageSettings(BaseSettings):
    """Retry policy for collaborator reads."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        extra="ignore"
    )

    retry_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts before a connection error is re-raised"
    )
    retry_wait_min_seconds: float = Field(
        default=0.0,
        ge=0.0,
    )
    retry_wait_max_seconds: float = Field(
        default=10.0,
        ge=0.0,
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def forecast(self) -> ForecastSettings:
        return ForecastSettings()

    @property
    def report(self) -> ReportSettings:
        return ReportSettings()

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error entries for the ones that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("forecast", "report", "storage", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
