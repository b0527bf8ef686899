# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Value types for age computation and class-level placement.

This module defines:
- ClassCode: The five placement categories
- ClassLevelRule: Age interval attached to each category
- AgeAtReference: Exact age between a birth date and a reference date
- ClassLevelClassification: Placement result for one child and cutoff
- EnrollmentEligibility / EnrollmentAge: Results for a labelled academic year

All types are frozen; a classification is recomputed, never updated, when
the academic year context changes.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class ClassCode(str, Enum):
    """Class level codes of the French maternelle system."""

    TOO_YOUNG = "TJ"
    PETITE_SECTION = "PS"
    MOYENNE_SECTION = "MS"
    GRANDE_SECTION = "GS"
    TOO_OLD = "TA"


@dataclass(frozen=True)
class ClassLevelRule:
    """Half-open age interval [min_years, max_years) for a class code.

    Attributes:
        code: Class code the interval maps to.
        min_years: Inclusive lower bound on whole years at cutoff.
        max_years: Exclusive upper bound, None when unbounded.
        is_eligible: Whether children in the interval may enroll.
    """

    code: ClassCode
    min_years: int
    max_years: int | None
    is_eligible: bool

    def matches(self, years: int) -> bool:
        """Check whether whole years fall within the interval."""
        if years < self.min_years:
            return False
        return self.max_years is None or years < self.max_years


# Ordered and contiguous from 0 years upward
CLASS_LEVEL_RULES: tuple[ClassLevelRule, ...] = (
    ClassLevelRule(ClassCode.TOO_YOUNG, 0, 2, is_eligible=False),
    ClassLevelRule(ClassCode.PETITE_SECTION, 2, 4, is_eligible=True),
    ClassLevelRule(ClassCode.MOYENNE_SECTION, 4, 5, is_eligible=True),
    ClassLevelRule(ClassCode.GRANDE_SECTION, 5, 6, is_eligible=True),
    ClassLevelRule(ClassCode.TOO_OLD, 6, None, is_eligible=False),
)


@dataclass(frozen=True)
class AgeAtReference:
    """Age of a child on a fixed reference date.

    ``years``, ``months`` and ``days`` are the calendar breakdown;
    ``total_months`` equals ``years * 12 + months`` and ``total_days`` is
    the plain day difference.
    """

    years: int
    months: int
    days: int
    total_months: int
    total_days: int
    birth_date: date
    reference_date: date


@dataclass(frozen=True)
class ClassLevelClassification:
    """Class-level placement of a child at a cutoff date.

    Attributes:
        class_code: Placement category.
        class_level_name: Localized category name, e.g. "Petite Section".
        age_range_label: Localized age range, e.g. "2-4 ans".
        description: Localized pedagogical description.
        is_eligible: Whether the child may enroll.
        age_at_cutoff: Exact age at the cutoff date.
        academic_year_label: Academic year containing the cutoff date.
        cutoff_date: Date the age was computed at.
        locale: Locale used for the text fields.
    """

    class_code: ClassCode
    class_level_name: str
    age_range_label: str
    description: str
    is_eligible: bool
    age_at_cutoff: AgeAtReference
    academic_year_label: str
    cutoff_date: date
    locale: str


@dataclass(frozen=True)
class EnrollmentEligibility:
    """Enrollment verdict for a child and a labelled academic year."""

    eligible: bool
    class_code: ClassCode
    class_level_name: str
    academic_year_label: str
    cutoff_date: date
    age_at_cutoff: AgeAtReference
    reasons: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class EnrollmentAge:
    """Age and placement used when enrolling for an academic year.

    Attributes:
        classification: Placement at December 31 of the start year.
        academic_year_label: Requested academic year.
        enrollment_date: September 1 of the start year.
    """

    classification: ClassLevelClassification
    academic_year_label: str
    enrollment_date: date

    @property
    def enrollment_eligible(self) -> bool:
        """Whether the child may enroll for the academic year."""
        return self.classification.is_eligible
