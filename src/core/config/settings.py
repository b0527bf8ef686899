# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for the
École Nid Douillet backend core. Settings are loaded from environment
variables with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings() for dependency injection.

Example:
    >>> from src.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.institution.timezone)
    'Africa/Casablanca'
"""

from functools import lru_cache
from typing import Literal, Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class InstitutionSettings(BaseSettings):
    """Institution calendar configuration.

    All date arithmetic runs in the institution timezone. The enrollment
    window defaults mirror the historical school policy (March 1 to
    July 31 of the academic start year).

    Attributes:
        name: Display name of the institution.
        timezone: IANA timezone used to determine "today".
        default_locale: Locale used when a request does not specify one.
        cutoff_policy: How the December 31 cutoff is chosen for dates
            between January and August.
        enrollment_open_month: Month the enrollment window opens.
        enrollment_open_day: Day the enrollment window opens.
        enrollment_close_month: Month the enrollment window closes.
        enrollment_close_day: Day the enrollment window closes.
        min_start_year: Earliest academic start year accepted.
        max_start_year: Latest academic start year accepted.
    """

    model_config = SettingsConfigDict(
        env_prefix="INSTITUTION_",
        extra="ignore",
    )

    name: str = "École Nid Douillet"
    timezone: str = "Africa/Casablanca"
    default_locale: Literal["fr", "ar"] = "fr"
    cutoff_policy: Literal["academic_year", "calendar_year"] = "academic_year"
    enrollment_open_month: int = Field(default=3, ge=1, le=12)
    enrollment_open_day: int = Field(default=1, ge=1, le=31)
    enrollment_close_month: int = Field(default=7, ge=1, le=12)
    enrollment_close_day: int = Field(default=31, ge=1, le=31)
    min_start_year: int = 2020
    max_start_year: int = 2050

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Reject timezone names unknown to the tz database."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @model_validator(mode="after")
    def validate_year_range(self) -> Self:
        """Ensure the supported start year range is not empty.

        Raises:
            ValueError: If min_start_year is greater than max_start_year.
        """
        if self.min_start_year > self.max_start_year:
            raise ValueError(
                "INSTITUTION_MIN_START_YEAR must not exceed INSTITUTION_MAX_START_YEAR"
            )
        return self

    @property
    def tzinfo(self) -> ZoneInfo:
        """Timezone object for the institution."""
        return ZoneInfo(self.timezone)


class CORSSettings(BaseSettings):
    """CORS configuration for API.

    Attributes:
        origins: Comma-separated list of allowed origins.
        allow_credentials: Whether to allow credentials.
        allow_methods: Allowed HTTP methods.
        allow_headers: Allowed HTTP headers.
    """

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        extra="ignore",
    )

    origins: str = "http://localhost:3000,http://localhost:5173"
    allow_credentials: bool = True
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into a list."""
        return [origin.strip() for origin in self.origins.split(",") if origin.strip()]


class APISettings(BaseSettings):
    """API server configuration.

    Attributes:
        host: Host to bind to.
        port: Port to listen on.
        workers: Number of worker processes.
        reload: Whether to enable auto-reload.
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 3000
    workers: int = 2
    reload: bool = False


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        institution: Institution calendar settings.
        cors: CORS settings.
        api: API server settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    # Subsettings - loaded with their own env prefixes
    institution: InstitutionSettings = Field(default_factory=InstitutionSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)
    api: APISettings = Field(default_factory=APISettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()
