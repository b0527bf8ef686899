# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Request and response models for class-level endpoints.

Field aliases keep the camelCase names already consumed by the parent
portal and director dashboard (classLevel, classCode, ageRange,
isEligible, ageAtCutoff, academicYear, cutoffDate).
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from src.domains.class_level.formatting import get_formatter
from src.domains.class_level.models import (
    AgeAtReference,
    ClassLevelClassification,
    EnrollmentEligibility,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ClassifyRequest(_CamelModel):
    """Request body for class-level classification.

    Exactly one of cutoff_date, academic_year or reference_date should be
    given; when none is, the academic year in effect today is used.
    """

    birth_date: str = Field(alias="birthDate", description="Birth date (YYYY-MM-DD)")
    cutoff_date: str | None = Field(
        default=None, alias="cutoffDate", description="Explicit cutoff date"
    )
    academic_year: str | None = Field(
        default=None, alias="academicYear", description="Academic year label (YYYY-YYYY)"
    )
    reference_date: str | None = Field(
        default=None, alias="referenceDate", description="Day the placement is requested"
    )
    locale: str | None = Field(default=None, description="Locale code (fr, ar)")


class EligibilityRequest(_CamelModel):
    """Request body for enrollment eligibility validation."""

    birth_date: str = Field(alias="birthDate", description="Birth date (YYYY-MM-DD)")
    academic_year: str = Field(alias="academicYear", description="Academic year label")
    locale: str | None = Field(default=None, description="Locale code (fr, ar)")


class AgeResponse(_CamelModel):
    """Exact age at a reference date."""

    years: int
    months: int
    days: int
    total_months: int = Field(alias="totalMonths")
    total_days: int = Field(alias="totalDays")
    formatted: str
    birth_date: date = Field(alias="birthDate")
    reference_date: date = Field(alias="referenceDate")

    @classmethod
    def from_age(cls, age: AgeAtReference, locale: str | None = None) -> "AgeResponse":
        """Build the response from a computed age.

        Args:
            age: Computed age.
            locale: Locale used for the formatted string.

        Returns:
            AgeResponse DTO.
        """
        return cls(
            years=age.years,
            months=age.months,
            days=age.days,
            total_months=age.total_months,
            total_days=age.total_days,
            formatted=get_formatter(locale).format_age(age.years, age.months, age.days),
            birth_date=age.birth_date,
            reference_date=age.reference_date,
        )


class ClassLevelResponse(_CamelModel):
    """Class-level placement, e.g. {classLevel: "Petite Section", classCode: "PS"}."""

    class_level: str = Field(alias="classLevel")
    class_code: str = Field(alias="classCode")
    age_range: str = Field(alias="ageRange")
    description: str
    is_eligible: bool = Field(alias="isEligible")
    age_at_cutoff: AgeResponse = Field(alias="ageAtCutoff")
    cutoff_date: date = Field(alias="cutoffDate")
    academic_year: str = Field(alias="academicYear")
    locale: str

    @classmethod
    def from_classification(
        cls, classification: ClassLevelClassification
    ) -> "ClassLevelResponse":
        """Build the response from a classification."""
        return cls(
            class_level=classification.class_level_name,
            class_code=classification.class_code.value,
            age_range=classification.age_range_label,
            description=classification.description,
            is_eligible=classification.is_eligible,
            age_at_cutoff=AgeResponse.from_age(
                classification.age_at_cutoff, classification.locale
            ),
            cutoff_date=classification.cutoff_date,
            academic_year=classification.academic_year_label,
            locale=classification.locale,
        )


class EligibilityResponse(_CamelModel):
    """Enrollment eligibility verdict."""

    eligible: bool
    class_level: str = Field(alias="classLevel")
    class_code: str = Field(alias="classCode")
    age_at_cutoff: AgeResponse = Field(alias="ageAtCutoff")
    reasons: list[str]
    academic_year: str = Field(alias="academicYear")
    cutoff_date: date = Field(alias="cutoffDate")

    @classmethod
    def from_eligibility(
        cls, eligibility: EnrollmentEligibility, locale: str | None = None
    ) -> "EligibilityResponse":
        """Build the response from an eligibility verdict."""
        return cls(
            eligible=eligibility.eligible,
            class_level=eligibility.class_level_name,
            class_code=eligibility.class_code.value,
            age_at_cutoff=AgeResponse.from_age(eligibility.age_at_cutoff, locale),
            reasons=eligibility.reasons,
            academic_year=eligibility.academic_year_label,
            cutoff_date=eligibility.cutoff_date,
        )
