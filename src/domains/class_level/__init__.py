# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class level domain package.

This package provides age-based class placement including:
- Exact age computation at a cutoff date
- Classification into TJ / PS / MS / GS / TA
- Enrollment eligibility for a labelled academic year
- Localized (French, Arabic) presentation of ages and class levels
"""

from src.domains.class_level.classifier import (
    calculate_enrollment_age,
    class_level_for_years,
    classify,
    classify_for_reference_date,
    compute_age,
    validate_enrollment_eligibility,
)
from src.domains.class_level.formatting import (
    DEFAULT_LOCALE,
    AgeFormatter,
    ArabicAgeFormatter,
    FormatterRegistry,
    FrenchAgeFormatter,
    format_age,
    get_formatter,
    get_formatter_registry,
)
from src.domains.class_level.models import (
    CLASS_LEVEL_RULES,
    AgeAtReference,
    ClassCode,
    ClassLevelClassification,
    ClassLevelRule,
    EnrollmentAge,
    EnrollmentEligibility,
)

__all__ = [
    # Classifier
    "compute_age",
    "classify",
    "classify_for_reference_date",
    "class_level_for_years",
    "calculate_enrollment_age",
    "validate_enrollment_eligibility",
    # Formatting
    "DEFAULT_LOCALE",
    "AgeFormatter",
    "FrenchAgeFormatter",
    "ArabicAgeFormatter",
    "FormatterRegistry",
    "format_age",
    "get_formatter",
    "get_formatter_registry",
    # Models
    "CLASS_LEVEL_RULES",
    "AgeAtReference",
    "ClassCode",
    "ClassLevelClassification",
    "ClassLevelRule",
    "EnrollmentAge",
    "EnrollmentEligibility",
]
