# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Age computation and class-level placement.

Placement uses the child's whole years at the December 31 cutoff of the
academic year, mapped through half-open intervals:

    [0, 2) TJ   [2, 4) PS   [4, 5) MS   [5, 6) GS   [6, inf) TA

A child turning exactly 4 on the cutoff date is therefore MS, not PS.
Every function is a pure function of its arguments.
"""

from __future__ import annotations

from datetime import date

from dateutil.relativedelta import relativedelta

from src.core.exceptions import InvalidDateError
from src.domains.academic_year.resolver import (
    ACADEMIC_YEAR_START_MONTH,
    CUTOFF_DAY,
    CUTOFF_MONTH,
    CutoffPolicy,
    academic_year_label,
    get_cutoff_date,
    parse_academic_year_label,
)
from src.domains.class_level.formatting import get_formatter
from src.domains.class_level.models import (
    CLASS_LEVEL_RULES,
    AgeAtReference,
    ClassLevelClassification,
    ClassLevelRule,
    EnrollmentAge,
    EnrollmentEligibility,
)


def compute_age(birth_date: date, reference_date: date) -> AgeAtReference:
    """Exact age of a child on a reference date.

    Uses calendar subtraction: whole years, then whole months, then the
    remaining days counted from the last monthly anniversary. A birthday
    on the 31st anniversaries on the last day of shorter months.

    Args:
        birth_date: Child's birth date.
        reference_date: Date the age is measured at.

    Returns:
        Age breakdown and totals.

    Raises:
        InvalidDateError: If birth_date is after reference_date.

    Example:
        >>> age = compute_age(date(2021, 3, 15), date(2024, 12, 31))
        >>> age.years, age.months, age.days
        (3, 9, 16)
    """
    if birth_date > reference_date:
        raise InvalidDateError(
            "Birth date is after the reference date",
            {
                "birth_date": birth_date.isoformat(),
                "reference_date": reference_date.isoformat(),
            },
        )

    delta = relativedelta(reference_date, birth_date)

    return AgeAtReference(
        years=delta.years,
        months=delta.months,
        days=delta.days,
        total_months=delta.years * 12 + delta.months,
        total_days=(reference_date - birth_date).days,
        birth_date=birth_date,
        reference_date=reference_date,
    )


def class_level_for_years(years: int) -> ClassLevelRule:
    """Rule whose interval contains ``years``.

    Raises:
        ValueError: If years is negative.
    """
    if years < 0:
        raise ValueError(f"Age cannot be negative (got {years})")

    for rule in CLASS_LEVEL_RULES:
        if rule.matches(years):
            return rule

    # CLASS_LEVEL_RULES covers [0, inf)
    raise RuntimeError(f"No class level found for {years} years")


def classify(
    birth_date: date,
    cutoff_date: date,
    locale: str | None = None,
) -> ClassLevelClassification:
    """Place a child in a class level at a cutoff date.

    Only the whole-year component of the age is used. Ages outside the
    school range classify as TJ or TA instead of failing.

    Args:
        birth_date: Child's birth date.
        cutoff_date: Cutoff date of the academic year (usually December 31).
        locale: Locale for the text fields, default locale if None.

    Returns:
        The classification.

    Raises:
        InvalidDateError: If birth_date is after cutoff_date.
        UnsupportedLocaleError: If the locale is not registered.
    """
    formatter = get_formatter(locale)
    age = compute_age(birth_date, cutoff_date)
    rule = class_level_for_years(age.years)

    return ClassLevelClassification(
        class_code=rule.code,
        class_level_name=formatter.class_level_name(rule.code),
        age_range_label=formatter.age_range_label(rule.code),
        description=formatter.description(rule.code),
        is_eligible=rule.is_eligible,
        age_at_cutoff=age,
        academic_year_label=academic_year_label(cutoff_date),
        cutoff_date=cutoff_date,
        locale=formatter.locale,
    )


def classify_for_reference_date(
    birth_date: date,
    reference_date: date,
    cutoff_policy: CutoffPolicy | str = CutoffPolicy.ACADEMIC_YEAR,
    locale: str | None = None,
) -> ClassLevelClassification:
    """Classify a child for the academic year in effect on ``reference_date``.

    Args:
        birth_date: Child's birth date.
        reference_date: Day the placement is requested, typically today.
        cutoff_policy: Rule used to derive the cutoff date.
        locale: Locale for the text fields.

    Returns:
        The classification at the derived cutoff date.
    """
    return classify(birth_date, get_cutoff_date(reference_date, cutoff_policy), locale)


def _cutoff_for_label(academic_year: str) -> tuple[int, date]:
    start_year, _ = parse_academic_year_label(academic_year)
    return start_year, date(start_year, CUTOFF_MONTH, CUTOFF_DAY)


def calculate_enrollment_age(
    birth_date: date,
    academic_year: str,
    locale: str | None = None,
) -> EnrollmentAge:
    """Age and placement for enrolling in a labelled academic year.

    Args:
        birth_date: Child's birth date.
        academic_year: Label such as "2024-2025".
        locale: Locale for the text fields.

    Returns:
        Placement at December 31 of the start year and the enrollment
        date (September 1 of the start year).

    Raises:
        FormatError: If the label is malformed.
        InvalidDateError: If the child is born after the cutoff.
    """
    start_year, cutoff_date = _cutoff_for_label(academic_year)

    return EnrollmentAge(
        classification=classify(birth_date, cutoff_date, locale),
        academic_year_label=academic_year,
        enrollment_date=date(start_year, ACADEMIC_YEAR_START_MONTH, 1),
    )


def validate_enrollment_eligibility(
    birth_date: date,
    academic_year: str,
    locale: str | None = None,
) -> EnrollmentEligibility:
    """Check whether a child can enroll for a labelled academic year.

    Ineligible children get a reason naming the violated bound; eligible
    children get a single affirmative reason.

    Args:
        birth_date: Child's birth date.
        academic_year: Label such as "2024-2025".
        locale: Locale for names and reasons.

    Returns:
        The eligibility verdict.

    Raises:
        FormatError: If the label is malformed.
        InvalidDateError: If the child is born after the cutoff.

    Example:
        >>> result = validate_enrollment_eligibility(date(2023, 6, 15), "2024-2025")
        >>> result.eligible, result.reasons
        (False, ["L'enfant est trop jeune (moins de 2 ans au 31 décembre)"])
    """
    _, cutoff_date = _cutoff_for_label(academic_year)
    classification = classify(birth_date, cutoff_date, locale)
    formatter = get_formatter(classification.locale)

    return EnrollmentEligibility(
        eligible=classification.is_eligible,
        class_code=classification.class_code,
        class_level_name=classification.class_level_name,
        academic_year_label=academic_year,
        cutoff_date=cutoff_date,
        age_at_cutoff=classification.age_at_cutoff,
        reasons=formatter.eligibility_reasons(classification.class_code),
    )
