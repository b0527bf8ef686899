# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Locale-specific presentation of ages and class levels.

Classification logic never produces text itself; it asks the formatter
registered for a locale code. Adding a language means adding an
AgeFormatter subclass and registering it.

This module provides:
- AgeFormatter: Base strategy for one locale
- FrenchAgeFormatter: "3 ans et 6 mois", "Petite Section"
- ArabicAgeFormatter: "3 سنوات و 6 أشهر", "القسم الصغير"
- FormatterRegistry / get_formatter: Lookup by locale code

Usage:
    from src.domains.class_level.formatting import get_formatter

    formatter = get_formatter("fr")
    formatter.format_age(3, 6, 0)  # "3 ans et 6 mois"
"""

from abc import ABC, abstractmethod
from typing import Iterator

from src.core.config import get_settings
from src.core.exceptions import UnsupportedLocaleError
from src.domains.class_level.models import ClassCode

DEFAULT_LOCALE = "fr"


class AgeFormatter(ABC):
    """Presentation strategy for a single locale.

    Subclasses provide the text tables and the age phrasing rules.

    Attributes:
        locale: Locale code, e.g. "fr".
        class_level_names: Display name per class code.
        age_range_labels: Age range label per class code.
        descriptions: Pedagogical description per class code.
        too_young_reason: Ineligibility reason below 2 years.
        too_old_reason: Ineligibility reason at 6 years or more.
        eligible_reason: Affirmative reason for eligible children.
    """

    locale: str
    class_level_names: dict[ClassCode, str]
    age_range_labels: dict[ClassCode, str]
    descriptions: dict[ClassCode, str]
    too_young_reason: str
    too_old_reason: str
    eligible_reason: str

    @abstractmethod
    def format_age(self, years: int, months: int, days: int) -> str:
        """Human-readable age.

        Args:
            years: Whole years.
            months: Remaining months (0-11).
            days: Remaining days.

        Returns:
            Localized age string.
        """

    def class_level_name(self, code: ClassCode) -> str:
        """Display name for a class code."""
        return self.class_level_names[code]

    def age_range_label(self, code: ClassCode) -> str:
        """Age range label for a class code."""
        return self.age_range_labels[code]

    def description(self, code: ClassCode) -> str:
        """Pedagogical description for a class code."""
        return self.descriptions[code]

    def eligibility_reasons(self, code: ClassCode) -> list[str]:
        """Reasons explaining the enrollment verdict for a class code."""
        if code is ClassCode.TOO_YOUNG:
            return [self.too_young_reason]
        if code is ClassCode.TOO_OLD:
            return [self.too_old_reason]
        return [self.eligible_reason]


class FrenchAgeFormatter(AgeFormatter):
    """French presentation (default locale)."""

    locale = "fr"
    class_level_names = {
        ClassCode.TOO_YOUNG: "Trop jeune",
        ClassCode.PETITE_SECTION: "Petite Section",
        ClassCode.MOYENNE_SECTION: "Moyenne Section",
        ClassCode.GRANDE_SECTION: "Grande Section",
        ClassCode.TOO_OLD: "Trop âgé",
    }
    age_range_labels = {
        ClassCode.TOO_YOUNG: "Moins de 2 ans",
        ClassCode.PETITE_SECTION: "2-4 ans",
        ClassCode.MOYENNE_SECTION: "4-5 ans",
        ClassCode.GRANDE_SECTION: "5-6 ans",
        ClassCode.TOO_OLD: "Plus de 6 ans",
    }
    descriptions = {
        ClassCode.TOO_YOUNG: "L'enfant est trop jeune pour l'inscription en maternelle",
        ClassCode.PETITE_SECTION: (
            "Première année de maternelle - Développement de l'autonomie et socialisation"
        ),
        ClassCode.MOYENNE_SECTION: (
            "Deuxième année de maternelle - Développement du langage et motricité fine"
        ),
        ClassCode.GRANDE_SECTION: (
            "Troisième année de maternelle - Préparation à l'école primaire"
        ),
        ClassCode.TOO_OLD: "L'enfant devrait être en école primaire",
    }
    too_young_reason = "L'enfant est trop jeune (moins de 2 ans au 31 décembre)"
    too_old_reason = "L'enfant est trop âgé (6 ans ou plus au 31 décembre)"
    eligible_reason = "Éligible pour l'inscription"

    def format_age(self, years: int, months: int, days: int) -> str:
        """Format an age in French.

        Days are only shown for children under one year.

        Example:
            >>> FrenchAgeFormatter().format_age(3, 6, 12)
            '3 ans et 6 mois'
        """
        parts = []

        if years > 0:
            parts.append("1 an" if years == 1 else f"{years} ans")

        if months > 0:
            parts.append(f"{months} mois")

        if days > 0 and years == 0:
            parts.append("1 jour" if days == 1 else f"{days} jours")

        if not parts:
            return "Nouveau-né"

        if len(parts) == 1:
            return parts[0]

        return ", ".join(parts[:-1]) + " et " + parts[-1]


class ArabicAgeFormatter(AgeFormatter):
    """Arabic presentation with singular, dual and plural forms."""

    locale = "ar"
    class_level_names = {
        ClassCode.TOO_YOUNG: "صغير جدا",
        ClassCode.PETITE_SECTION: "القسم الصغير",
        ClassCode.MOYENNE_SECTION: "القسم المتوسط",
        ClassCode.GRANDE_SECTION: "القسم الكبير",
        ClassCode.TOO_OLD: "كبير جدا",
    }
    age_range_labels = {
        ClassCode.TOO_YOUNG: "أقل من سنتين",
        ClassCode.PETITE_SECTION: "2-4 سنوات",
        ClassCode.MOYENNE_SECTION: "4-5 سنوات",
        ClassCode.GRANDE_SECTION: "5-6 سنوات",
        ClassCode.TOO_OLD: "أكثر من 6 سنوات",
    }
    descriptions = {
        ClassCode.TOO_YOUNG: "الطفل صغير جدا على التسجيل في التعليم الأولي",
        ClassCode.PETITE_SECTION: "السنة الأولى من التعليم الأولي - تنمية الاستقلالية والتنشئة الاجتماعية",
        ClassCode.MOYENNE_SECTION: "السنة الثانية من التعليم الأولي - تنمية اللغة والمهارات الحركية الدقيقة",
        ClassCode.GRANDE_SECTION: "السنة الثالثة من التعليم الأولي - التحضير للمدرسة الابتدائية",
        ClassCode.TOO_OLD: "يجب أن يكون الطفل في المدرسة الابتدائية",
    }
    too_young_reason = "الطفل صغير جدا (أقل من سنتين في 31 دجنبر)"
    too_old_reason = "الطفل كبير جدا (6 سنوات أو أكثر في 31 دجنبر)"
    eligible_reason = "مؤهل للتسجيل"

    # (singular, dual, plural 3-10, 11 and above)
    _YEAR_FORMS = ("سنة واحدة", "سنتان", "{n} سنوات", "{n} سنة")
    _MONTH_FORMS = ("شهر واحد", "شهران", "{n} أشهر", "{n} شهرا")
    _DAY_FORMS = ("يوم واحد", "يومان", "{n} أيام", "{n} يوما")

    @staticmethod
    def _count(n: int, forms: tuple[str, str, str, str]) -> str:
        singular, dual, plural, accusative = forms
        if n == 1:
            return singular
        if n == 2:
            return dual
        if 3 <= n <= 10:
            return plural.format(n=n)
        return accusative.format(n=n)

    def format_age(self, years: int, months: int, days: int) -> str:
        """Format an age in Arabic.

        Same visibility rules as French: days only under one year.

        Example:
            >>> ArabicAgeFormatter().format_age(2, 1, 0)
            'سنتان و شهر واحد'
        """
        parts = []

        if years > 0:
            parts.append(self._count(years, self._YEAR_FORMS))

        if months > 0:
            parts.append(self._count(months, self._MONTH_FORMS))

        if days > 0 and years == 0:
            parts.append(self._count(days, self._DAY_FORMS))

        if not parts:
            return "مولود جديد"

        return " و ".join(parts)


class FormatterRegistry:
    """Registry of age formatters keyed by locale code.

    Populated once at import time and read-only afterwards.

    Example:
        registry = FormatterRegistry()
        registry.register(FrenchAgeFormatter())
        registry.get("fr").format_age(1, 0, 0)
    """

    def __init__(self, default_locale: str = DEFAULT_LOCALE) -> None:
        """Initialize an empty registry.

        Args:
            default_locale: Locale returned when none is requested.
        """
        self._formatters: dict[str, AgeFormatter] = {}
        self.default_locale = default_locale

    def register(self, formatter: AgeFormatter) -> None:
        """Register a formatter for its locale.

        Raises:
            ValueError: If a formatter already exists for the locale.
        """
        if formatter.locale in self._formatters:
            raise ValueError(f"Formatter for '{formatter.locale}' already registered")

        self._formatters[formatter.locale] = formatter

    def get(self, locale: str | None = None) -> AgeFormatter:
        """Formatter for a locale code.

        Region subtags are ignored ("fr-MA" resolves to "fr").

        Args:
            locale: Locale code, or None for the default locale.

        Returns:
            The registered formatter.

        Raises:
            UnsupportedLocaleError: If no formatter matches.
        """
        code = (locale or self.default_locale).strip().lower().replace("_", "-")
        formatter = self._formatters.get(code) or self._formatters.get(code.split("-")[0])
        if formatter is None:
            raise UnsupportedLocaleError(locale or "", self.available())
        return formatter

    def available(self) -> list[str]:
        """Registered locale codes, sorted."""
        return sorted(self._formatters)

    def __contains__(self, locale: str) -> bool:
        return locale in self._formatters

    def __iter__(self) -> Iterator[AgeFormatter]:
        return iter(self._formatters.values())


_registry = FormatterRegistry()
_registry.register(FrenchAgeFormatter())
_registry.register(ArabicAgeFormatter())


def get_formatter_registry() -> FormatterRegistry:
    """Get the default formatter registry."""
    return _registry


def get_formatter(locale: str | None = None) -> AgeFormatter:
    """Formatter for a locale from the default registry.

    Args:
        locale: Locale code, or None for INSTITUTION_DEFAULT_LOCALE.

    Raises:
        UnsupportedLocaleError: If the locale is not registered.
    """
    if locale is None:
        locale = get_settings().institution.default_locale
    return _registry.get(locale)


def format_age(years: int, months: int, days: int, locale: str | None = None) -> str:
    """Human-readable age in the requested locale."""
    return get_formatter(locale).format_age(years, months, days)
