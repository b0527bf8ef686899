# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions for academic calendar and class-level operations.

This module defines the exception hierarchy shared by the academic year
resolver, the class-level classifier and the age formatters:
- AcademicCalendarError: Base exception for all calendar-related errors
- FormatError: Malformed academic year label
- InvalidDateError: Unparseable or semantically invalid date input
- UnsupportedLocaleError: No formatter registered for a locale code
"""


class AcademicCalendarError(Exception):
    """Base exception for academic calendar errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Initialize academic calendar error.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class FormatError(AcademicCalendarError):
    """Academic year label does not match the YYYY-YYYY pattern.

    Attributes:
        value: The rejected input.
    """

    def __init__(self, message: str, value: str | None = None):
        self.value = value
        details = {"value": value} if value is not None else None
        super().__init__(message, details)


class InvalidDateError(AcademicCalendarError):
    """Date input cannot be parsed or is invalid in context.

    Raised for unparseable ISO strings, birth dates after the reference
    date, start years outside the supported range and academic years
    that do not run September to June.
    """

    pass


class UnsupportedLocaleError(AcademicCalendarError):
    """No age formatter is registered for the requested locale.

    Attributes:
        locale: The requested locale code.
        available: Registered locale codes.
    """

    def __init__(self, locale: str, available: list[str]):
        self.locale = locale
        self.available = available
        available_str = ", ".join(available)
        super().__init__(
            f"Locale '{locale}' is not supported. "
            f"Available: {available_str or 'none'}"
        )
