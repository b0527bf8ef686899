# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for the École Nid Douillet backend.

This module provides standardized date operations to ensure consistency
across the entire codebase. All date operations should use these utilities.

Design Decisions:
-----------------
1. Calendar logic operates on ``datetime.date`` only, never on datetimes
2. Dates enter the system once, through parse_date(), at the boundary
3. "Today" is always evaluated in the institution timezone
4. Timestamps that leave the system (health checks, logs) are UTC

Usage:
------
    from src.utils.datetime import institution_today, parse_date

    birth_date = parse_date("2021-03-15")
    today = institution_today()
"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from src.core.config import get_settings
from src.core.exceptions import InvalidDateError


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def institution_today(tz: ZoneInfo | str | None = None) -> date:
    """Get today's date in the institution timezone.

    Args:
        tz: Timezone object or IANA name. Defaults to the configured
            institution timezone.

    Returns:
        The calendar date currently observed by the institution.

    Example:
        >>> institution_today("Africa/Casablanca")
        datetime.date(2025, 3, 14)
    """
    if tz is None:
        tz = get_settings().institution.tzinfo
    elif isinstance(tz, str):
        tz = ZoneInfo(tz)

    return datetime.now(tz).date()


def parse_date(value: date | str | None, field: str = "date") -> date:
    """Normalize a boundary date input into a ``datetime.date``.

    Accepts ISO-8601 calendar date strings (``YYYY-MM-DD``), ``date``
    objects and ``datetime`` objects (the calendar part is kept).

    Args:
        value: Raw input value.
        field: Name of the input, used in error messages.

    Returns:
        Parsed calendar date.

    Raises:
        InvalidDateError: If the value is missing or not a valid date.
    """
    if value is None:
        raise InvalidDateError(f"Missing {field}", {"field": field})

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidDateError(
                f"Invalid {field}: {value!r}",
                {"field": field, "value": value},
            ) from e

    raise InvalidDateError(
        f"Invalid {field} type: {type(value).__name__}",
        {"field": field},
    )


def days_between(start: date, end: date) -> int:
    """Signed number of days from start to end."""
    return (end - start).days
