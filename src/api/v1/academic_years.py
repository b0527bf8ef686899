# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Academic year API endpoints.

This module provides read-only endpoints over the academic calendar:
- GET /resolve - Academic year containing a date (default: today)
- GET / - Consecutive academic years from a start year
- GET /{label} - Academic year for a "YYYY-YYYY" label
- GET /{label}/next - Label of the following academic year

Academic years are computed, not stored; persistence of academic year
rows belongs to the administration service.
"""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_resolver, get_today
from src.core.exceptions import FormatError, InvalidDateError
from src.domains.academic_year.resolver import (
    AcademicYearResolver,
    academic_start_year,
    next_academic_year,
)
from src.models.academic_year import (
    AcademicYearListResponse,
    AcademicYearResponse,
    AcademicYearTransitionResponse,
)
from src.utils.datetime import parse_date

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/resolve",
    response_model=AcademicYearResponse,
    summary="Resolve academic year",
    description="Get the academic year containing a date. Defaults to today.",
)
async def resolve_academic_year(
    on: Annotated[
        str | None, Query(alias="date", description="Reference date (YYYY-MM-DD)")
    ] = None,
    today: date = Depends(get_today),
    resolver: AcademicYearResolver = Depends(get_resolver),
) -> AcademicYearResponse:
    """Resolve the academic year containing a date.

    Args:
        on: Reference date, today when omitted.
        today: Institution-local current date.
        resolver: Configured academic year resolver.

    Returns:
        Academic year window.

    Raises:
        HTTPException: If the date cannot be parsed.
    """
    try:
        reference_date = parse_date(on, "date") if on else today
    except InvalidDateError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    window = resolver.resolve(reference_date)
    logger.info("Resolved academic year %s for %s", window.label, reference_date)

    return AcademicYearResponse.from_window(window, today)


@router.get(
    "",
    response_model=AcademicYearListResponse,
    summary="List academic years",
    description="List consecutive academic years from a start year.",
)
async def list_academic_years(
    start_year: Annotated[
        int | None,
        Query(alias="startYear", description="First start year, current year when omitted"),
    ] = None,
    count: Annotated[int, Query(ge=1, le=20, description="Number of years")] = 5,
    today: date = Depends(get_today),
    resolver: AcademicYearResolver = Depends(get_resolver),
) -> AcademicYearListResponse:
    """List consecutive academic years.

    Args:
        start_year: First start year.
        count: Number of years to return.
        today: Institution-local current date.
        resolver: Configured academic year resolver.

    Returns:
        List of academic years.

    Raises:
        HTTPException: If a start year is outside the supported range.
    """
    first_year = start_year if start_year is not None else academic_start_year(today)

    try:
        windows = resolver.generate(first_year, count)
    except InvalidDateError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    items = [AcademicYearResponse.from_window(window, today) for window in windows]

    return AcademicYearListResponse(items=items, total=len(items))


@router.get(
    "/{label}",
    response_model=AcademicYearResponse,
    summary="Get academic year",
    description="Get the academic year for a YYYY-YYYY label.",
)
async def get_academic_year(
    label: str,
    today: date = Depends(get_today),
    resolver: AcademicYearResolver = Depends(get_resolver),
) -> AcademicYearResponse:
    """Get the academic year for a label.

    Args:
        label: Academic year label.
        today: Institution-local current date.
        resolver: Configured academic year resolver.

    Returns:
        Academic year window.

    Raises:
        HTTPException: If the label is malformed or unsupported.
    """
    try:
        window = resolver.window_for_label(label)
    except (FormatError, InvalidDateError) as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return AcademicYearResponse.from_window(window, today)


@router.get(
    "/{label}/next",
    response_model=AcademicYearTransitionResponse,
    summary="Next academic year",
    description="Get the label of the academic year following a label.",
)
async def get_next_academic_year(label: str) -> AcademicYearTransitionResponse:
    """Get the following academic year label.

    Args:
        label: Academic year label.

    Returns:
        Current and next labels.

    Raises:
        HTTPException: If the label is malformed.
    """
    try:
        next_label = next_academic_year(label)
    except FormatError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return AcademicYearTransitionResponse(academic_year=label, next_academic_year=next_label)
