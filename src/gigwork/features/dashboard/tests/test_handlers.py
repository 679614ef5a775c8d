"""Tests for dashboard API handlers."""

from unittest.mock import MagicMock, Mock, patch

import pytest
from fastapi.testclient import TestClient

from src.gigwork.auth.dependencies import get_auth_session
from src.gigwork.auth.session import AuthSession
from src.gigwork.database.models import parse_profile
from src.gigwork.main import app


@pytest.fixture
def mock_fetch_profile():
    with patch("src.gigwork.features.dashboard.handlers.fetch_profile") as mock:
        yield mock


@pytest.fixture
def anonymous_client(client: TestClient):
    app.dependency_overrides[get_auth_session] = lambda: AuthSession(user=None)
    yield client
    app.dependency_overrides = {}


def test_dashboard_redirects_anonymous_to_login(anonymous_client, mock_fetch_profile):
    """Test GET /dashboard without a session redirects to /auth before any fetch."""
    response = anonymous_client.get("/api/v1/dashboard", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/auth"
    mock_fetch_profile.assert_not_called()


def test_dashboard_without_token_redirects(client: TestClient, mock_fetch_profile):
    """Test a request with no Authorization header is treated as anonymous."""
    response = client.get("/api/v1/dashboard", follow_redirects=False)

    assert response.status_code == 307
    mock_fetch_profile.assert_not_called()


def test_dashboard_manufacturer_tabs(client_with_auth, mock_fetch_profile, manufacturer_row):
    """Test GET /dashboard returns the manufacturer tab set."""
    mock_fetch_profile.return_value = parse_profile(manufacturer_row)

    response = client_with_auth.get("/api/v1/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["view"] == "tabbed"
    assert data["default_tab"] == "my-jobs"
    assert [tab["id"] for tab in data["tabs"]] == [
        "available-jobs",
        "my-applications",
        "my-jobs",
        "create-job",
    ]
    assert data["tabs"][2]["endpoint"] == "/api/v1/jobs/mine"
    assert data["profile"]["user_type"] == "manufacturer"
    assert data["welcome_name"] == "Acme Fabrication"


def test_dashboard_profile_setup(client_with_auth, mock_fetch_profile, worker_row):
    """Test GET /dashboard returns the setup view for an incomplete profile."""
    worker_row["gig_worker_details"] = []
    mock_fetch_profile.return_value = parse_profile(worker_row)

    response = client_with_auth.get("/api/v1/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["view"] == "profile_setup"
    assert data["tabs"] == []


def test_dashboard_fetch_error(client_with_auth, mock_fetch_profile):
    """Test GET /dashboard surfaces a fetch failure as an error view."""
    mock_fetch_profile.side_effect = Exception("connection reset")

    response = client_with_auth.get("/api/v1/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["view"] == "error"
    assert data["profile"] is None
    assert data["notifications"] == [
        {"title": "Error", "description": "Failed to fetch profile", "variant": "destructive"}
    ]


def test_sign_out_redirects_to_landing(client: TestClient, test_user):
    """Test POST /dashboard/sign-out redirects to / on success."""
    auth_client = MagicMock()
    app.dependency_overrides[get_auth_session] = lambda: AuthSession(
        user=test_user, access_token="test-access-token", client=auth_client
    )
    try:
        response = client.post("/api/v1/dashboard/sign-out", follow_redirects=False)
    finally:
        app.dependency_overrides = {}

    assert response.status_code == 303
    assert response.headers["location"] == "/"
    auth_client.auth.admin.sign_out.assert_called_once_with("test-access-token")


def test_sign_out_failure_returns_notification(client: TestClient, test_user):
    """Test POST /dashboard/sign-out reports auth errors as a notification."""
    auth_client = Mock()
    auth_client.auth.admin.sign_out.side_effect = Exception("Session expired")
    app.dependency_overrides[get_auth_session] = lambda: AuthSession(
        user=test_user, access_token="test-access-token", client=auth_client
    )
    try:
        response = client.post("/api/v1/dashboard/sign-out", follow_redirects=False)
    finally:
        app.dependency_overrides = {}

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["notifications"][0]["description"] == "Session expired"
