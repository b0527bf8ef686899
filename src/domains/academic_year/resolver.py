# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Academic year resolution for the French kindergarten calendar.

The institution's academic year runs from September 1 to June 30 and is
labelled "YYYY-YYYY". Age-based class placement uses December 31 as the
cutoff date.

This module provides:
- AcademicYearWindow: Immutable description of one academic year
- AcademicYearResolver: Date to window resolution under a cutoff policy
- Label parsing, year transitions and enrollment window predicates
- Status and countdown helpers for an academic year

Every function takes the reference date explicitly; nothing here reads
the clock.

Example:
    >>> resolve_academic_year(date(2024, 10, 15)).label
    '2024-2025'
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

from src.core.exceptions import FormatError, InvalidDateError
from src.utils.datetime import days_between

if TYPE_CHECKING:
    from src.core.config.settings import InstitutionSettings


ACADEMIC_YEAR_START_MONTH = 9
ACADEMIC_YEAR_END_MONTH = 6
ACADEMIC_YEAR_END_DAY = 30
CUTOFF_MONTH = 12
CUTOFF_DAY = 31

DEFAULT_ENROLLMENT_OPEN = (3, 1)
DEFAULT_ENROLLMENT_CLOSE = (7, 31)
DEFAULT_MIN_START_YEAR = 2020
DEFAULT_MAX_START_YEAR = 2050

_LABEL_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{4})$")


class CutoffPolicy(str, Enum):
    """Rule used to pick the December 31 cutoff for a reference date.

    ACADEMIC_YEAR: December 31 of the academic year's start year. A date
        in March 2025 belongs to 2024-2025 and gets 2024-12-31.
    CALENDAR_YEAR: December 31 of the reference date's own calendar year,
        whatever the month. A date in March 2025 gets 2025-12-31. This is
        the historical behavior of the school's system.
    """

    ACADEMIC_YEAR = "academic_year"
    CALENDAR_YEAR = "calendar_year"


class AcademicYearStatus(str, Enum):
    """Lifecycle position of an academic year relative to a given day."""

    UPCOMING = "upcoming"
    ENROLLMENT_OPEN = "enrollment_open"
    CURRENT = "current"
    PAST = "past"


@dataclass(frozen=True)
class AcademicYearWindow:
    """One academic year of the institution.

    Under CutoffPolicy.ACADEMIC_YEAR the window always satisfies
    ``start_date < cutoff_date < end_date``. Under CALENDAR_YEAR a window
    resolved from a January to August date has its cutoff after end_date.

    Attributes:
        label: Display label, e.g. "2024-2025".
        start_date: September 1 of the start year.
        end_date: June 30 of the following year.
        cutoff_date: December 31 used for age-based placement.
        enrollment_open_date: First day enrollment forms are accepted.
        enrollment_close_date: Last day enrollment forms are accepted.
    """

    label: str
    start_date: date
    end_date: date
    cutoff_date: date
    enrollment_open_date: date
    enrollment_close_date: date

    @property
    def start_year(self) -> int:
        """Calendar year in which the academic year starts."""
        return self.start_date.year

    @property
    def end_year(self) -> int:
        """Calendar year in which the academic year ends."""
        return self.end_date.year

    def contains(self, day: date) -> bool:
        """Check whether a day falls within the teaching period (inclusive)."""
        return self.start_date <= day <= self.end_date


def _clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping the day to the month's length."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def academic_start_year(day: date) -> int:
    """Start year of the academic year containing ``day``.

    September to December belong to the year starting that September;
    January to August belong to the year that started the previous
    September.
    """
    if day.month >= ACADEMIC_YEAR_START_MONTH:
        return day.year
    return day.year - 1


def format_academic_year_label(start_year: int) -> str:
    """Label for the academic year starting in ``start_year``."""
    return f"{start_year}-{start_year + 1}"


def academic_year_label(day: date) -> str:
    """Label of the academic year containing ``day``.

    Example:
        >>> academic_year_label(date(2024, 1, 15))
        '2023-2024'
    """
    return format_academic_year_label(academic_start_year(day))


def parse_academic_year_label(label: str) -> tuple[int, int]:
    """Split a "YYYY-YYYY" label into its start and end years.

    Only the shape is validated: "2024-2030" parses to (2024, 2030).
    Callers needing a one-year span should compare the two values.

    Args:
        label: Academic year label.

    Returns:
        Tuple of (start_year, end_year).

    Raises:
        FormatError: If the label does not match YYYY-YYYY.
    """
    if not isinstance(label, str):
        raise FormatError("Academic year label must be a string", value=repr(label))

    match = _LABEL_PATTERN.match(label.strip())
    if not match:
        raise FormatError(
            f"Invalid academic year label '{label}', expected YYYY-YYYY",
            value=label,
        )

    return int(match.group(1)), int(match.group(2))


def next_academic_year(label: str) -> str:
    """Label of the academic year following ``label``.

    Raises:
        FormatError: If the label is malformed.
    """
    start_year, _ = parse_academic_year_label(label)
    return format_academic_year_label(start_year + 1)


def is_within_enrollment_window(now: date, open_date: date, close_date: date) -> bool:
    """Check whether ``now`` lies in [open_date, close_date].

    An inverted interval (open after close) contains no day.
    """
    return open_date <= now <= close_date


def get_cutoff_date(
    reference_date: date,
    cutoff_policy: CutoffPolicy | str = CutoffPolicy.ACADEMIC_YEAR,
) -> date:
    """December 31 cutoff applicable on ``reference_date``.

    Args:
        reference_date: Any calendar date.
        cutoff_policy: Rule for January to August dates.

    Returns:
        The cutoff date.
    """
    if CutoffPolicy(cutoff_policy) is CutoffPolicy.CALENDAR_YEAR:
        cutoff_year = reference_date.year
    else:
        cutoff_year = academic_start_year(reference_date)
    return date(cutoff_year, CUTOFF_MONTH, CUTOFF_DAY)


class AcademicYearResolver:
    """Resolves dates and labels into academic year windows.

    The resolver is immutable once constructed and safe to share between
    request handlers.

    Attributes:
        cutoff_policy: Rule used to choose the cutoff date.
        enrollment_open: (month, day) the enrollment window opens.
        enrollment_close: (month, day) the enrollment window closes.
        min_start_year: Earliest start year accepted by window_for_start_year.
        max_start_year: Latest start year accepted by window_for_start_year.
    """

    def __init__(
        self,
        cutoff_policy: CutoffPolicy | str = CutoffPolicy.ACADEMIC_YEAR,
        enrollment_open: tuple[int, int] = DEFAULT_ENROLLMENT_OPEN,
        enrollment_close: tuple[int, int] = DEFAULT_ENROLLMENT_CLOSE,
        min_start_year: int = DEFAULT_MIN_START_YEAR,
        max_start_year: int = DEFAULT_MAX_START_YEAR,
    ) -> None:
        """Initialize the resolver.

        Args:
            cutoff_policy: Rule used to choose the cutoff date.
            enrollment_open: (month, day) the enrollment window opens.
            enrollment_close: (month, day) the enrollment window closes.
            min_start_year: Earliest supported start year.
            max_start_year: Latest supported start year.
        """
        self.cutoff_policy = CutoffPolicy(cutoff_policy)
        self.enrollment_open = enrollment_open
        self.enrollment_close = enrollment_close
        self.min_start_year = min_start_year
        self.max_start_year = max_start_year

    @classmethod
    def from_settings(cls, settings: InstitutionSettings) -> AcademicYearResolver:
        """Build a resolver from institution settings.

        Args:
            settings: Institution calendar configuration.

        Returns:
            Configured resolver.
        """
        return cls(
            cutoff_policy=settings.cutoff_policy,
            enrollment_open=(settings.enrollment_open_month, settings.enrollment_open_day),
            enrollment_close=(settings.enrollment_close_month, settings.enrollment_close_day),
            min_start_year=settings.min_start_year,
            max_start_year=settings.max_start_year,
        )

    def cutoff_date(self, reference_date: date) -> date:
        """Cutoff date for ``reference_date`` under this resolver's policy."""
        return get_cutoff_date(reference_date, self.cutoff_policy)

    def resolve(self, reference_date: date) -> AcademicYearWindow:
        """Resolve the academic year window containing ``reference_date``.

        Total over all valid dates; the supported start year range is not
        checked here.

        Args:
            reference_date: Any calendar date.

        Returns:
            The academic year window.
        """
        start_year = academic_start_year(reference_date)
        return self._build_window(start_year, self.cutoff_date(reference_date))

    def window_for_start_year(
        self,
        start_year: int,
        enrollment_open_date: date | None = None,
        enrollment_close_date: date | None = None,
    ) -> AcademicYearWindow:
        """Build the window for the academic year starting in ``start_year``.

        The cutoff is always December 31 of the start year.

        Args:
            start_year: Calendar year of September 1.
            enrollment_open_date: Override for the enrollment opening day.
            enrollment_close_date: Override for the enrollment closing day.

        Returns:
            The academic year window.

        Raises:
            InvalidDateError: If the start year is outside the supported
                range or the enrollment window is inverted.
        """
        if not self.min_start_year <= start_year <= self.max_start_year:
            raise InvalidDateError(
                f"Start year {start_year} is outside the supported range",
                {"min": self.min_start_year, "max": self.max_start_year},
            )

        window = self._build_window(
            start_year,
            date(start_year, CUTOFF_MONTH, CUTOFF_DAY),
            enrollment_open_date,
            enrollment_close_date,
        )

        if window.enrollment_open_date > window.enrollment_close_date:
            raise InvalidDateError(
                "Enrollment opening date must not be after its closing date",
                {
                    "open": window.enrollment_open_date.isoformat(),
                    "close": window.enrollment_close_date.isoformat(),
                },
            )

        return window

    def window_for_label(self, label: str) -> AcademicYearWindow:
        """Build the window for a "YYYY-YYYY" label.

        Raises:
            FormatError: If the label is malformed.
            InvalidDateError: If the start year is unsupported.
        """
        start_year, _ = parse_academic_year_label(label)
        return self.window_for_start_year(start_year)

    def generate(self, start_year: int, count: int = 5) -> list[AcademicYearWindow]:
        """Windows for ``count`` consecutive academic years.

        Args:
            start_year: Start year of the first window.
            count: Number of windows to build.

        Returns:
            Windows in chronological order.

        Raises:
            InvalidDateError: If any start year is unsupported.
        """
        return [self.window_for_start_year(start_year + offset) for offset in range(count)]

    def _build_window(
        self,
        start_year: int,
        cutoff_date: date,
        enrollment_open_date: date | None = None,
        enrollment_close_date: date | None = None,
    ) -> AcademicYearWindow:
        open_month, open_day = self.enrollment_open
        close_month, close_day = self.enrollment_close

        return AcademicYearWindow(
            label=format_academic_year_label(start_year),
            start_date=date(start_year, ACADEMIC_YEAR_START_MONTH, 1),
            end_date=date(start_year + 1, ACADEMIC_YEAR_END_MONTH, ACADEMIC_YEAR_END_DAY),
            cutoff_date=cutoff_date,
            enrollment_open_date=enrollment_open_date
            or _clamped_date(start_year, open_month, open_day),
            enrollment_close_date=enrollment_close_date
            or _clamped_date(start_year, close_month, close_day),
        )


def resolve_academic_year(
    reference_date: date,
    cutoff_policy: CutoffPolicy | str = CutoffPolicy.ACADEMIC_YEAR,
) -> AcademicYearWindow:
    """Resolve the academic year window containing ``reference_date``.

    Example:
        >>> window = resolve_academic_year(date(2024, 10, 15))
        >>> window.start_date, window.end_date
        (datetime.date(2024, 9, 1), datetime.date(2025, 6, 30))
    """
    return AcademicYearResolver(cutoff_policy=cutoff_policy).resolve(reference_date)


def academic_year_status(window: AcademicYearWindow, today: date) -> AcademicYearStatus:
    """Position of ``window`` relative to ``today``.

    Before the start date the year is ENROLLMENT_OPEN while its
    enrollment window contains today, UPCOMING otherwise.
    """
    if today < window.start_date:
        if is_within_enrollment_window(
            today, window.enrollment_open_date, window.enrollment_close_date
        ):
            return AcademicYearStatus.ENROLLMENT_OPEN
        return AcademicYearStatus.UPCOMING
    if today > window.end_date:
        return AcademicYearStatus.PAST
    return AcademicYearStatus.CURRENT


def days_until_start(window: AcademicYearWindow, today: date) -> int:
    """Days from today to the start date, negative once started."""
    return days_between(today, window.start_date)


def days_until_end(window: AcademicYearWindow, today: date) -> int:
    """Days from today to the end date, negative once ended."""
    return days_between(today, window.end_date)


def validate_academic_year_dates(start_date: date, end_date: date) -> None:
    """Check that explicit academic year dates follow the school calendar.

    Args:
        start_date: Proposed first day.
        end_date: Proposed last day.

    Raises:
        InvalidDateError: If the year does not start in September, does not
            end in June, or ends before it starts.
    """
    if start_date.month != ACADEMIC_YEAR_START_MONTH:
        raise InvalidDateError(
            "Academic year must start in September",
            {"start_date": start_date.isoformat()},
        )
    if end_date.month != ACADEMIC_YEAR_END_MONTH:
        raise InvalidDateError(
            "Academic year must end in June",
            {"end_date": end_date.isoformat()},
        )
    if end_date <= start_date:
        raise InvalidDateError(
            "End date must be after start date",
            {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
        )
