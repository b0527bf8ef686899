# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

This package contains all v1 API endpoint definitions.
Each module provides a FastAPI router for a specific domain.

Modules:
    academic_years: Academic calendar resolution endpoints.
    class_levels: Age computation, class placement and eligibility endpoints.
"""

from fastapi import APIRouter

from src.api.v1 import academic_years, class_levels

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

router.include_router(academic_years.router, prefix="/academic-years", tags=["Academic Years"])
router.include_router(class_levels.router, prefix="/class-levels", tags=["Class Levels"])

__all__ = ["router"]
