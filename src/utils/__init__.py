# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for the École Nid Douillet backend.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Boundary date parsing and institution-local "today"
"""

from src.utils.datetime import (
    days_between,
    institution_today,
    parse_date,
    utc_now,
)
from src.utils.logging import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Datetime
    "utc_now",
    "institution_today",
    "parse_date",
    "days_between",
]
