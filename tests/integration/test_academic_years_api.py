# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for Academic Years API endpoints."""

from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.dependencies import get_today
from src.api.v1 import router as v1_router


@pytest.fixture
def app(fixed_today):
    """Create test FastAPI app with a pinned clock."""
    app = FastAPI()
    app.include_router(v1_router)
    app.dependency_overrides[get_today] = lambda: fixed_today
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


class TestAcademicYearsAPIRouting:
    """Tests for academic years API routing."""

    def test_routes_registered(self, app):
        """Test that academic year routes are registered."""
        routes = [route.path for route in app.routes]

        assert "/api/v1/academic-years" in routes
        assert "/api/v1/academic-years/resolve" in routes
        assert "/api/v1/academic-years/{label}" in routes
        assert "/api/v1/academic-years/{label}/next" in routes


class TestResolveEndpoint:
    """Tests for GET /academic-years/resolve."""

    def test_resolve_today(self, client):
        """Test resolving the academic year in effect today."""
        response = client.get("/api/v1/academic-years/resolve")

        assert response.status_code == 200
        data = response.json()
        assert data["academicYear"] == "2024-2025"
        assert data["startYear"] == 2024
        assert data["endYear"] == 2025
        assert data["startDate"] == "2024-09-01"
        assert data["endDate"] == "2025-06-30"
        assert data["cutoffDate"] == "2024-12-31"
        assert data["status"] == "current"
        assert data["isEnrollmentOpen"] is False
        assert data["daysUntilStart"] == -194
        assert data["daysUntilEnd"] == 108

    def test_resolve_explicit_date(self, client):
        """Test resolving the academic year for a given date."""
        response = client.get("/api/v1/academic-years/resolve", params={"date": "2024-10-15"})

        assert response.status_code == 200
        data = response.json()
        assert data["academicYear"] == "2024-2025"
        assert data["enrollmentOpenDate"] == "2024-03-01"
        assert data["enrollmentCloseDate"] == "2024-07-31"

    def test_resolve_invalid_date(self, client):
        """Test an unparseable date returns 422."""
        response = client.get("/api/v1/academic-years/resolve", params={"date": "15/10/2024"})

        assert response.status_code == 422
        assert "Invalid date" in response.json()["detail"]


class TestListEndpoint:
    """Tests for GET /academic-years."""

    def test_list_from_start_year(self, client):
        """Test listing consecutive years from a start year."""
        response = client.get(
            "/api/v1/academic-years", params={"startYear": 2025, "count": 2}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [item["academicYear"] for item in data["items"]] == ["2025-2026", "2026-2027"]
        assert data["items"][0]["status"] == "enrollment_open"
        assert data["items"][0]["isEnrollmentOpen"] is True
        assert data["items"][0]["daysUntilStart"] == 171
        assert data["items"][1]["status"] == "upcoming"

    def test_list_defaults_to_current_year(self, client):
        """Test the list starts at the current academic year."""
        response = client.get("/api/v1/academic-years")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert data["items"][0]["academicYear"] == "2024-2025"

    @pytest.mark.parametrize("count", [0, 21])
    def test_list_count_bounds(self, client, count):
        """Test the count must be between 1 and 20."""
        response = client.get("/api/v1/academic-years", params={"count": count})

        assert response.status_code == 422

    def test_list_outside_supported_range(self, client):
        """Test a list crossing 2050 returns 422."""
        response = client.get(
            "/api/v1/academic-years", params={"startYear": 2049, "count": 3}
        )

        assert response.status_code == 422


class TestGetByLabelEndpoint:
    """Tests for GET /academic-years/{label}."""

    def test_get_by_label(self, client):
        """Test getting a future academic year."""
        response = client.get("/api/v1/academic-years/2025-2026")

        assert response.status_code == 200
        data = response.json()
        assert data["startDate"] == "2025-09-01"
        assert data["endDate"] == "2026-06-30"
        assert data["cutoffDate"] == "2025-12-31"
        assert data["status"] == "enrollment_open"

    def test_get_past_year(self, client):
        """Test a finished academic year is reported as past."""
        response = client.get("/api/v1/academic-years/2022-2023")

        assert response.status_code == 200
        assert response.json()["status"] == "past"

    def test_malformed_label(self, client):
        """Test a malformed label returns 422."""
        response = client.get("/api/v1/academic-years/2024_2025")

        assert response.status_code == 422
        assert "YYYY-YYYY" in response.json()["detail"]

    def test_unsupported_start_year(self, client):
        """Test a start year outside the supported range returns 422."""
        response = client.get("/api/v1/academic-years/2051-2052")

        assert response.status_code == 422


class TestNextEndpoint:
    """Tests for GET /academic-years/{label}/next."""

    def test_next_label(self, client):
        """Test the following academic year label."""
        response = client.get("/api/v1/academic-years/2024-2025/next")

        assert response.status_code == 200
        assert response.json() == {
            "academicYear": "2024-2025",
            "nextAcademicYear": "2025-2026",
        }

    def test_next_malformed_label(self, client):
        """Test a malformed label returns 422."""
        response = client.get("/api/v1/academic-years/2024.2025/next")

        assert response.status_code == 422


class TestPinnedClock:
    """Tests that the clock dependency drives date-dependent fields."""

    def test_override_changes_status(self, app, client):
        """Test a different pinned date changes the resolved year."""
        app.dependency_overrides[get_today] = lambda: date(2025, 9, 2)

        response = client.get("/api/v1/academic-years/resolve")

        assert response.json()["academicYear"] == "2025-2026"
        assert response.json()["daysUntilStart"] == -1
