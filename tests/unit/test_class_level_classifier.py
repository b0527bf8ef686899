# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for age computation and class-level placement."""

import os
from datetime import date
from unittest.mock import patch

import pytest

from src.core.config import clear_settings_cache
from src.core.exceptions import FormatError, InvalidDateError, UnsupportedLocaleError
from src.domains.academic_year import CutoffPolicy
from src.domains.class_level import (
    CLASS_LEVEL_RULES,
    ClassCode,
    calculate_enrollment_age,
    class_level_for_years,
    classify,
    classify_for_reference_date,
    compute_age,
    validate_enrollment_eligibility,
)

CUTOFF_2024 = date(2024, 12, 31)


class TestComputeAge:
    """Tests for exact age computation."""

    def test_years_months_days(self):
        """Test the calendar breakdown and totals."""
        age = compute_age(date(2021, 3, 15), CUTOFF_2024)

        assert (age.years, age.months, age.days) == (3, 9, 16)
        assert age.total_months == 45
        assert age.total_days == 1387
        assert age.birth_date == date(2021, 3, 15)
        assert age.reference_date == CUTOFF_2024

    def test_same_day(self):
        """Test a child born on the reference date."""
        age = compute_age(CUTOFF_2024, CUTOFF_2024)

        assert (age.years, age.months, age.days) == (0, 0, 0)
        assert age.total_days == 0

    def test_exact_anniversary(self):
        """Test an exact birthday has no remaining months or days."""
        age = compute_age(date(2019, 12, 31), CUTOFF_2024)

        assert (age.years, age.months, age.days) == (5, 0, 0)
        assert age.total_months == 60

    def test_leap_day_birthday(self):
        """Test a February 29 birth reaches one year on February 28."""
        age = compute_age(date(2020, 2, 29), date(2021, 2, 28))

        assert (age.years, age.months, age.days) == (1, 0, 0)

    def test_month_end_birthday(self):
        """Test a birth on the 31st anniversaries on the last day of February."""
        age = compute_age(date(2024, 1, 31), date(2024, 2, 29))

        assert (age.years, age.months, age.days) == (0, 1, 0)

    def test_birth_after_reference(self):
        """Test that a birth date after the reference date is rejected."""
        with pytest.raises(InvalidDateError) as exc_info:
            compute_age(date(2025, 1, 1), CUTOFF_2024)

        assert exc_info.value.details["birth_date"] == "2025-01-01"


class TestClassLevelForYears:
    """Tests for the whole-year interval table."""

    @pytest.mark.parametrize(
        "years,expected",
        [
            (0, ClassCode.TOO_YOUNG),
            (1, ClassCode.TOO_YOUNG),
            (2, ClassCode.PETITE_SECTION),
            (3, ClassCode.PETITE_SECTION),
            (4, ClassCode.MOYENNE_SECTION),
            (5, ClassCode.GRANDE_SECTION),
            (6, ClassCode.TOO_OLD),
            (12, ClassCode.TOO_OLD),
        ],
    )
    def test_intervals(self, years, expected):
        """Test each whole-year age maps to its class code."""
        assert class_level_for_years(years).code is expected

    def test_negative_years(self):
        """Test that negative ages are rejected."""
        with pytest.raises(ValueError):
            class_level_for_years(-1)

    def test_rules_are_contiguous(self):
        """Test the rule table covers [0, inf) without gaps."""
        assert CLASS_LEVEL_RULES[0].min_years == 0
        assert CLASS_LEVEL_RULES[-1].max_years is None
        for previous, current in zip(CLASS_LEVEL_RULES, CLASS_LEVEL_RULES[1:]):
            assert previous.max_years == current.min_years

    def test_eligibility_flags(self):
        """Test only PS, MS and GS are eligible."""
        eligible = {rule.code for rule in CLASS_LEVEL_RULES if rule.is_eligible}

        assert eligible == {
            ClassCode.PETITE_SECTION,
            ClassCode.MOYENNE_SECTION,
            ClassCode.GRANDE_SECTION,
        }


class TestClassify:
    """Tests for placement at a cutoff date."""

    def test_petite_section(self):
        """Test a child aged 3y 9m 16d at the cutoff."""
        result = classify(date(2021, 3, 15), CUTOFF_2024)

        assert result.class_code is ClassCode.PETITE_SECTION
        assert result.class_level_name == "Petite Section"
        assert result.age_range_label == "2-4 ans"
        assert result.is_eligible is True
        assert result.academic_year_label == "2024-2025"
        assert result.cutoff_date == CUTOFF_2024
        assert result.locale == "fr"

    def test_moyenne_section_near_boundary(self):
        """Test 4y 11m 30d is still MS."""
        result = classify(date(2020, 1, 1), CUTOFF_2024)

        assert result.class_code is ClassCode.MOYENNE_SECTION
        assert (result.age_at_cutoff.years, result.age_at_cutoff.months) == (4, 11)
        assert result.age_at_cutoff.days == 30
        assert result.is_eligible is True

    def test_grande_section_exact_boundary(self):
        """Test exactly 5 years at the cutoff is GS."""
        result = classify(date(2019, 12, 31), CUTOFF_2024)

        assert result.class_code is ClassCode.GRANDE_SECTION
        assert result.is_eligible is True

    def test_too_young(self):
        """Test a child aged 1y 6m 30d at the cutoff."""
        result = classify(date(2023, 6, 1), CUTOFF_2024)

        assert result.class_code is ClassCode.TOO_YOUNG
        assert (result.age_at_cutoff.years, result.age_at_cutoff.months) == (1, 6)
        assert result.age_at_cutoff.days == 30
        assert result.is_eligible is False
        assert result.class_level_name == "Trop jeune"

    @pytest.mark.parametrize(
        "birth_date,expected",
        [
            (date(2023, 1, 1), ClassCode.TOO_YOUNG),
            (date(2022, 12, 31), ClassCode.PETITE_SECTION),
            (date(2021, 1, 1), ClassCode.PETITE_SECTION),
            (date(2020, 12, 31), ClassCode.MOYENNE_SECTION),
            (date(2019, 1, 1), ClassCode.GRANDE_SECTION),
            (date(2018, 12, 31), ClassCode.TOO_OLD),
        ],
    )
    def test_birthday_on_cutoff_moves_up(self, birth_date, expected):
        """Test that turning N on December 31 counts as N years."""
        assert classify(birth_date, CUTOFF_2024).class_code is expected

    def test_too_old(self):
        """Test a seven-year-old is TA and ineligible."""
        result = classify(date(2017, 5, 1), CUTOFF_2024)

        assert result.class_code is ClassCode.TOO_OLD
        assert result.class_level_name == "Trop âgé"
        assert result.is_eligible is False

    def test_arabic_locale(self):
        """Test text fields follow the requested locale."""
        result = classify(date(2021, 3, 15), CUTOFF_2024, locale="ar")

        assert result.class_level_name == "القسم الصغير"
        assert result.locale == "ar"

    def test_regional_locale(self):
        """Test region subtags resolve to the base locale."""
        assert classify(date(2021, 3, 15), CUTOFF_2024, locale="fr-MA").locale == "fr"

    def test_configured_default_locale(self):
        """Test INSTITUTION_DEFAULT_LOCALE applies when no locale is given."""
        with patch.dict(os.environ, {"INSTITUTION_DEFAULT_LOCALE": "ar"}, clear=False):
            clear_settings_cache()
            result = classify(date(2021, 3, 15), CUTOFF_2024)
            eligibility = validate_enrollment_eligibility(date(2023, 6, 15), "2024-2025")

        assert result.locale == "ar"
        assert result.class_level_name == "القسم الصغير"
        assert eligibility.reasons == ["الطفل صغير جدا (أقل من سنتين في 31 دجنبر)"]

    def test_unsupported_locale(self):
        """Test that an unknown locale is rejected."""
        with pytest.raises(UnsupportedLocaleError):
            classify(date(2021, 3, 15), CUTOFF_2024, locale="de")

    def test_idempotent(self):
        """Test repeated classification gives equal results."""
        first = classify(date(2021, 3, 15), CUTOFF_2024)
        second = classify(date(2021, 3, 15), CUTOFF_2024)

        assert first == second

    def test_birth_after_cutoff(self):
        """Test a child born after the cutoff is rejected."""
        with pytest.raises(InvalidDateError):
            classify(date(2025, 2, 1), CUTOFF_2024)


class TestClassifyForReferenceDate:
    """Tests for placement derived from a reference date."""

    def test_academic_policy_uses_start_year_cutoff(self):
        """Test a March reference date uses the previous December 31."""
        result = classify_for_reference_date(date(2021, 3, 15), date(2025, 3, 14))

        assert result.cutoff_date == date(2024, 12, 31)
        assert result.class_code is ClassCode.PETITE_SECTION

    def test_calendar_policy_uses_own_year_cutoff(self):
        """Test the calendar policy uses December 31 of the reference year."""
        result = classify_for_reference_date(
            date(2021, 3, 15),
            date(2025, 3, 14),
            cutoff_policy=CutoffPolicy.CALENDAR_YEAR,
        )

        assert result.cutoff_date == date(2025, 12, 31)
        assert result.class_code is ClassCode.MOYENNE_SECTION
        assert result.academic_year_label == "2025-2026"


class TestCalculateEnrollmentAge:
    """Tests for enrollment age for a labelled academic year."""

    def test_enrollment_age(self):
        """Test placement and enrollment date for 2024-2025."""
        result = calculate_enrollment_age(date(2021, 3, 15), "2024-2025")

        assert result.academic_year_label == "2024-2025"
        assert result.enrollment_date == date(2024, 9, 1)
        assert result.classification.cutoff_date == date(2024, 12, 31)
        assert result.classification.class_code is ClassCode.PETITE_SECTION
        assert result.enrollment_eligible is True

    def test_ineligible(self):
        """Test enrollment_eligible follows the classification."""
        result = calculate_enrollment_age(date(2023, 6, 1), "2024-2025")

        assert result.enrollment_eligible is False

    def test_malformed_label(self):
        """Test a malformed label raises FormatError."""
        with pytest.raises(FormatError):
            calculate_enrollment_age(date(2021, 3, 15), "2024/2025")


class TestValidateEnrollmentEligibility:
    """Tests for enrollment eligibility."""

    def test_eligible(self):
        """Test an eligible child gets an affirmative reason."""
        result = validate_enrollment_eligibility(date(2021, 3, 15), "2024-2025")

        assert result.eligible is True
        assert result.class_code is ClassCode.PETITE_SECTION
        assert result.reasons == ["Éligible pour l'inscription"]
        assert result.academic_year_label == "2024-2025"
        assert result.cutoff_date == date(2024, 12, 31)

    def test_too_young(self):
        """Test a too-young child gets the lower-bound reason."""
        result = validate_enrollment_eligibility(date(2023, 6, 15), "2024-2025")

        assert result.eligible is False
        assert result.class_code is ClassCode.TOO_YOUNG
        assert result.reasons == ["L'enfant est trop jeune (moins de 2 ans au 31 décembre)"]

    def test_too_old(self):
        """Test a too-old child gets the upper-bound reason."""
        result = validate_enrollment_eligibility(date(2017, 5, 1), "2024-2025")

        assert result.eligible is False
        assert result.class_code is ClassCode.TOO_OLD
        assert result.reasons == ["L'enfant est trop âgé (6 ans ou plus au 31 décembre)"]

    def test_arabic_reasons(self):
        """Test reasons follow the requested locale."""
        result = validate_enrollment_eligibility(date(2023, 6, 15), "2024-2025", locale="ar")

        assert result.class_level_name == "صغير جدا"
        assert result.reasons == ["الطفل صغير جدا (أقل من سنتين في 31 دجنبر)"]

    def test_label_not_contiguous(self):
        """Test only the start year of the label is used."""
        result = validate_enrollment_eligibility(date(2021, 3, 15), "2024-2030")

        assert result.cutoff_date == date(2024, 12, 31)
        assert result.academic_year_label == "2024-2030"

    def test_malformed_label(self):
        """Test a malformed label raises FormatError."""
        with pytest.raises(FormatError):
            validate_enrollment_eligibility(date(2021, 3, 15), "24-25")

    def test_born_after_cutoff(self):
        """Test a child born after the cutoff is rejected."""
        with pytest.raises(InvalidDateError):
            validate_enrollment_eligibility(date(2025, 2, 1), "2024-2025")
