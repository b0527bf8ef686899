# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Response models for academic year endpoints."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from src.domains.academic_year.resolver import (
    AcademicYearWindow,
    academic_year_status,
    days_until_end,
    days_until_start,
    is_within_enrollment_window,
)


class AcademicYearResponse(BaseModel):
    """Academic year window with its status relative to today."""

    model_config = ConfigDict(populate_by_name=True)

    academic_year: str = Field(alias="academicYear", description="Label, e.g. 2024-2025")
    start_year: int = Field(alias="startYear")
    end_year: int = Field(alias="endYear")
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    cutoff_date: date = Field(alias="cutoffDate")
    enrollment_open_date: date = Field(alias="enrollmentOpenDate")
    enrollment_close_date: date = Field(alias="enrollmentCloseDate")
    status: str
    is_enrollment_open: bool = Field(alias="isEnrollmentOpen")
    days_until_start: int = Field(alias="daysUntilStart")
    days_until_end: int = Field(alias="daysUntilEnd")

    @classmethod
    def from_window(cls, window: AcademicYearWindow, today: date) -> "AcademicYearResponse":
        """Build the response for a window as seen on ``today``.

        Args:
            window: Resolved academic year window.
            today: Institution-local current date.

        Returns:
            AcademicYearResponse DTO.
        """
        return cls(
            academic_year=window.label,
            start_year=window.start_year,
            end_year=window.end_year,
            start_date=window.start_date,
            end_date=window.end_date,
            cutoff_date=window.cutoff_date,
            enrollment_open_date=window.enrollment_open_date,
            enrollment_close_date=window.enrollment_close_date,
            status=academic_year_status(window, today).value,
            is_enrollment_open=is_within_enrollment_window(
                today, window.enrollment_open_date, window.enrollment_close_date
            ),
            days_until_start=days_until_start(window, today),
            days_until_end=days_until_end(window, today),
        )


class AcademicYearTransitionResponse(BaseModel):
    """Current and following academic year labels."""

    model_config = ConfigDict(populate_by_name=True)

    academic_year: str = Field(alias="academicYear")
    next_academic_year: str = Field(alias="nextAcademicYear")


class AcademicYearListResponse(BaseModel):
    """Consecutive academic years."""

    items: list[AcademicYearResponse]
    total: int
