# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class-level placement API endpoints.

This module provides endpoints used by the enrollment and child forms:
- POST /classify - Class level of a child for a cutoff or academic year
- POST /eligibility - Enrollment eligibility for an academic year
- GET /age - Exact age of a child on a date, formatted for display

The text fields follow the request locale (body field, then
Accept-Language, then the institution default).
"""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_locale, get_resolver, get_today
from src.core.exceptions import AcademicCalendarError
from src.domains.academic_year.resolver import AcademicYearResolver
from src.domains.class_level.classifier import (
    calculate_enrollment_age,
    classify,
    compute_age,
    validate_enrollment_eligibility,
)
from src.models.class_level import (
    AgeResponse,
    ClassifyRequest,
    ClassLevelResponse,
    EligibilityRequest,
    EligibilityResponse,
)
from src.utils.datetime import parse_date

logger = logging.getLogger(__name__)

router = APIRouter()


def _unprocessable(error: AcademicCalendarError) -> HTTPException:
    """Map a calendar error to a 422 response."""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=str(error),
    )


@router.post(
    "/classify",
    response_model=ClassLevelResponse,
    summary="Classify child",
    description=(
        "Determine the class level of a child at the December 31 cutoff. "
        "The cutoff comes from cutoffDate, academicYear or referenceDate, "
        "in that order, and defaults to the academic year in effect today."
    ),
)
async def classify_child(
    data: ClassifyRequest,
    today: date = Depends(get_today),
    resolver: AcademicYearResolver = Depends(get_resolver),
    request_locale: str = Depends(get_locale),
) -> ClassLevelResponse:
    """Classify a child into a class level.

    Args:
        data: Classification request.
        today: Institution-local current date.
        resolver: Configured academic year resolver.
        request_locale: Locale from the request headers.

    Returns:
        Class-level placement.

    Raises:
        HTTPException: If a date, label or locale is invalid.
    """
    locale = data.locale or request_locale

    try:
        birth_date = parse_date(data.birth_date, "birthDate")

        if data.cutoff_date:
            classification = classify(
                birth_date, parse_date(data.cutoff_date, "cutoffDate"), locale
            )
        elif data.academic_year:
            classification = calculate_enrollment_age(
                birth_date, data.academic_year, locale
            ).classification
        else:
            reference_date = (
                parse_date(data.reference_date, "referenceDate")
                if data.reference_date
                else today
            )
            classification = classify(birth_date, resolver.cutoff_date(reference_date), locale)
    except AcademicCalendarError as e:
        raise _unprocessable(e)

    logger.info(
        "Classified child: %s for %s",
        classification.class_code.value,
        classification.academic_year_label,
    )

    return ClassLevelResponse.from_classification(classification)


@router.post(
    "/eligibility",
    response_model=EligibilityResponse,
    summary="Validate enrollment eligibility",
    description="Check whether a child can enroll for an academic year.",
)
async def check_eligibility(
    data: EligibilityRequest,
    request_locale: str = Depends(get_locale),
) -> EligibilityResponse:
    """Validate enrollment eligibility.

    Args:
        data: Eligibility request.
        request_locale: Locale from the request headers.

    Returns:
        Eligibility verdict with reasons.

    Raises:
        HTTPException: If the date, label or locale is invalid.
    """
    locale = data.locale or request_locale

    try:
        birth_date = parse_date(data.birth_date, "birthDate")
        eligibility = validate_enrollment_eligibility(birth_date, data.academic_year, locale)
    except AcademicCalendarError as e:
        raise _unprocessable(e)

    if not eligibility.eligible:
        logger.info(
            "Enrollment rejected for %s: %s",
            eligibility.academic_year_label,
            eligibility.class_code.value,
        )

    return EligibilityResponse.from_eligibility(eligibility, locale)


@router.get(
    "/age",
    response_model=AgeResponse,
    summary="Compute age",
    description="Exact age of a child on a reference date (default: today).",
)
async def get_age(
    birth_date: Annotated[str, Query(alias="birthDate", description="Birth date")],
    reference_date: Annotated[
        str | None, Query(alias="referenceDate", description="Reference date")
    ] = None,
    locale: Annotated[str | None, Query(description="Locale code")] = None,
    today: date = Depends(get_today),
    request_locale: str = Depends(get_locale),
) -> AgeResponse:
    """Compute the exact age of a child.

    Args:
        birth_date: Birth date.
        reference_date: Reference date, today when omitted.
        locale: Locale override.
        today: Institution-local current date.
        request_locale: Locale from the request headers.

    Returns:
        Age with formatted string.

    Raises:
        HTTPException: If a date or the locale is invalid.
    """
    try:
        age = compute_age(
            parse_date(birth_date, "birthDate"),
            parse_date(reference_date, "referenceDate") if reference_date else today,
        )
        return AgeResponse.from_age(age, locale or request_locale)
    except AcademicCalendarError as e:
        raise _unprocessable(e)
