# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Academic year domain package.

This package provides academic calendar functionality including:
- Resolving a date to its academic year window and cutoff date
- Parsing and transitioning "YYYY-YYYY" labels
- Enrollment window checks and academic year status
"""

from src.domains.academic_year.resolver import (
    AcademicYearResolver,
    AcademicYearStatus,
    AcademicYearWindow,
    CutoffPolicy,
    academic_start_year,
    academic_year_label,
    academic_year_status,
    days_until_end,
    days_until_start,
    format_academic_year_label,
    get_cutoff_date,
    is_within_enrollment_window,
    next_academic_year,
    parse_academic_year_label,
    resolve_academic_year,
    validate_academic_year_dates,
)

__all__ = [
    "AcademicYearResolver",
    "AcademicYearStatus",
    "AcademicYearWindow",
    "CutoffPolicy",
    "academic_start_year",
    "academic_year_label",
    "academic_year_status",
    "days_until_end",
    "days_until_start",
    "format_academic_year_label",
    "get_cutoff_date",
    "is_within_enrollment_window",
    "next_academic_year",
    "parse_academic_year_label",
    "resolve_academic_year",
    "validate_academic_year_dates",
]
