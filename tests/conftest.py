# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from collections.abc import Generator
from datetime import date

import pytest

from src.core.config import clear_settings_cache


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reload settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def calendar_environment() -> dict[str, str]:
    """Provide institution environment variables for testing.

    Returns:
        Dictionary of environment variables for testing.
    """
    return {
        "ENVIRONMENT": "development",
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
        "INSTITUTION_TIMEZONE": "Africa/Casablanca",
        "INSTITUTION_DEFAULT_LOCALE": "fr",
        "INSTITUTION_CUTOFF_POLICY": "academic_year",
    }


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def fixed_today() -> date:
    """Provide a pinned institution-local date (inside the enrollment window)."""
    return date(2025, 3, 14)


@pytest.fixture
def sample_birth_date() -> date:
    """Provide a birth date that places the child in Petite Section for 2024-2025."""
    return date(2021, 3, 15)
