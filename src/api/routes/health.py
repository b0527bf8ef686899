# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Health check endpoints.

This module provides health and readiness endpoints for the API.
"""

import logging
import time
from datetime import datetime
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from src import __version__
from src.core.config import get_settings
from src.domains.class_level.formatting import get_formatter_registry
from src.utils.datetime import institution_today, utc_now

logger = logging.getLogger(__name__)

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(description="Current server timestamp")
    version: str = Field(description="API version")
    environment: str = Field(description="Deployment environment")
    uptime_seconds: int = Field(description="Server uptime in seconds")


class ReadinessResponse(BaseModel):
    """Readiness check response model."""
    ready: bool = Field(description="Whether the service is ready")
    checks: dict[str, Any] = Field(description="Individual check results")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe."""
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        timestamp=utc_now(),
        version=__version__,
        environment=settings.environment,
        uptime_seconds=int(time.time() - _server_start_time),
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """Readiness probe.

    The service is ready once the institution timezone resolves and the
    default locale has a registered formatter.
    """
    settings = get_settings()
    checks: dict[str, Any] = {}

    try:
        checks["timezone"] = {
            "status": "ok",
            "timezone": settings.institution.timezone,
            "today": institution_today(settings.institution.tzinfo).isoformat(),
        }
    except Exception as e:
        logger.error("Timezone check failed: %s", e)
        checks["timezone"] = {"status": "error", "message": str(e)}

    locales = get_formatter_registry().available()
    checks["locales"] = {
        "status": "ok" if settings.institution.default_locale in locales else "error",
        "available": locales,
        "default": settings.institution.default_locale,
    }

    ready = all(check["status"] == "ok" for check in checks.values())
    return ReadinessResponse(ready=ready, checks=checks)
