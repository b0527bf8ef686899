# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

This module provides dependency functions for FastAPI endpoints.
Dependencies are used to:
- Get application settings
- Get the institution-local current date
- Get the configured academic year resolver
- Resolve the request locale

Tests replace get_today through app.dependency_overrides to pin the clock.

Example:
    @router.get("/academic-years/resolve")
    async def resolve(
        today: date = Depends(get_today),
        resolver: AcademicYearResolver = Depends(get_resolver),
    ):
        ...
"""

import logging
from datetime import date
from typing import Annotated

from fastapi import Depends, Header

from src.core.config import Settings, get_settings
from src.domains.academic_year.resolver import AcademicYearResolver
from src.domains.class_level.formatting import get_formatter_registry
from src.utils.datetime import institution_today

logger = logging.getLogger(__name__)


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


def get_today(settings: Settings = Depends(get_app_settings)) -> date:
    """Get today's date in the institution timezone.

    Args:
        settings: Application settings.

    Returns:
        Institution-local current date.
    """
    return institution_today(settings.institution.tzinfo)


def get_resolver(settings: Settings = Depends(get_app_settings)) -> AcademicYearResolver:
    """Get an academic year resolver configured from settings.

    Args:
        settings: Application settings.

    Returns:
        Configured AcademicYearResolver instance.
    """
    return AcademicYearResolver.from_settings(settings.institution)


def get_locale(
    accept_language: Annotated[str | None, Header()] = None,
    settings: Settings = Depends(get_app_settings),
) -> str:
    """Resolve the request locale from the Accept-Language header.

    Only the primary language tag of the first entry is considered. The
    configured default locale is used when the header is missing or names
    a language without a registered formatter.

    Args:
        accept_language: Raw Accept-Language header.
        settings: Application settings.

    Returns:
        Locale code.
    """
    if not accept_language:
        return settings.institution.default_locale

    primary = accept_language.split(",")[0].split(";")[0].strip().lower()
    primary = primary.replace("_", "-").split("-")[0]
    if primary in get_formatter_registry():
        return primary
    return settings.institution.default_locale
