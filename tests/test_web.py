"""Tests for the browser view.

Tests use ``pytest.importorskip`` so they are skipped gracefully when
Flask is not installed.
"""

from __future__ import annotations

from typing import Any

import pytest

flask = pytest.importorskip("flask")

from fcfs_seek.web.app import create_app  # noqa: E402

HTTP_OK = 200


def _create_client() -> Any:
    """Create a test client from a fresh app."""
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


class TestAppCreation:
    """Verify app factory and landing page."""

    def test_create_app_returns_flask(self) -> None:
        """create_app should return a Flask application."""
        assert isinstance(create_app(), flask.Flask)

    def test_index_returns_text_report(self) -> None:
        """GET / should return the same text as the CLI."""
        response = _create_client().get("/")
        assert response.status_code == HTTP_OK
        assert "text/plain" in response.content_type
        assert b"Total head movement: 238\n" in response.data


class TestApiEndpoints:
    """Verify the JSON endpoints."""

    def test_report(self) -> None:
        """GET /api/report should return the figures."""
        response = _create_client().get("/api/report")
        assert response.status_code == HTTP_OK
        data = response.get_json()
        assert data["total"] == 238
        assert data["initial_head"] == 50
        assert data["average"] == pytest.approx(238 / 9)

    def test_log(self) -> None:
        """GET /api/log should list the entries from computing the report."""
        data = _create_client().get("/api/log").get_json()
        assert len(data) == 10
        assert data[-1]["level"] == "INFO"
        assert all(entry["source"] == "movement" for entry in data)
