"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.services.quota_validator import MIN_CYCLE_SECONDS
from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class GESettings(BaseSettings):
    """Service metadata and HTTP server settings."""

    title: str = Field(default="Bandwidth Quota Forecast", description="Service title")
    description: str = Field(
        default="Forecasts monthly bandwidth usage and derives the speed limit "
        "that keeps consumption under the cap",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("GE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class PrometheusSettings(BaseSettings):
    """Metrics backend configuration settings."""

    url: str = Field(
        default="http://localhost:9090", description="Prometheus server URL"
    )
    timeout: float = Field(
        default=30.0, gt=0, description="Range query timeout in seconds"
    )
    usage_query: str = Field(
        default="l4_total_bytes",
        description="Expression returning cumulative byte counters per cycle",
    )
    rate_query_template: str = Field(
        default="rate(l4_total_bytes[{interval}])",
        description=(
            "Rate expression; every literal '{interval}' is replaced by the "
            "sampling interval, other braces are kept as written"
        ),
    )
    cycle_label: str = Field(
        default="since",
        description="Label carrying the 'YYYY-MM' billing cycle of each series",
    )

    model_config = SettingsConfigDict(
        env_prefix="PROMETHEUS_", case_sensitive=False, extra="ignore"
    )


class QuotaSettings(BaseSettings):
    """Default parameters of the forecast control law."""

    cap: float = Field(default=1e12, gt=0, description="Monthly byte cap")
    grace_seconds: float = Field(
        default=3600,
        gt=0,
        le=MIN_CYCLE_SECONDS,
        description="Grace window over which the speed limit smooths",
    )
    peak_rate: float = Field(
        default=4103250, gt=0, description="Peak transfer rate in bytes per second"
    )
    early_shift_bytes: float = Field(
        default=0, ge=0, description="Extra allowance moved to the cycle start"
    )
    timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone of the billing calendar (host local when unset)",
    )

    model_config = SettingsConfigDict(
        env_prefix="QUOTA_", case_sensitive=False, extra="ignore"
    )

    @field_validator("timezone")
    @classmethod
    def _empty_timezone_is_local(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class ForecastSettings(BaseSettings):
    """Default query range and resolution."""

    sampling_interval: str = Field(
        default="6h", pattern=r"^(?:\d+(?:ms|s|m|h|d|w|y))+$"
    )
    lookback_days: int = Field(
        default=30, gt=0, description="Default range length when no start is given"
    )

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    ge: GESettings = Field(default_factory=GESettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    prometheus: PrometheusSettings = Field(default_factory=PrometheusSettings)
    quota: QuotaSettings = Field(default_factory=QuotaSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()


settings = get_settings()
