"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from src.gigwork.auth.dependencies import get_auth_session, get_current_user
from src.gigwork.auth.models import SessionUser
from src.gigwork.auth.session import AuthSession
from src.gigwork.main import app
from src.gigwork.services.rate_limiter import limiter

TEST_USER_ID = UUID("123e4567-e89b-12d3-a456-426614174000")
MANUFACTURER_PROFILE_ID = "11111111-1111-4111-8111-111111111111"
WORKER_PROFILE_ID = "22222222-2222-4222-8222-222222222222"
JOB_ID = "33333333-3333-4333-8333-333333333333"
APPLICATION_ID = "44444444-4444-4444-8444-444444444444"


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear in-memory rate limit counters between tests."""
    limiter.reset()
    yield


@pytest.fixture
def client() -> TestClient:
    """
    Provide FastAPI test client for API testing.

    Returns:
        TestClient instance for making API requests

    Example:
        >>> def test_health(client):
        >>>     response = client.get("/health")
        >>>     assert response.status_code == 200
    """
    return TestClient(app)


@pytest.fixture
def test_user() -> SessionUser:
    """Authenticated user shared by handler tests."""
    return SessionUser(id=TEST_USER_ID, email="test@example.com", user_metadata={})


@pytest.fixture
def client_with_auth(client: TestClient, test_user: SessionUser):
    """Test client whose requests resolve to test_user."""
    app.dependency_overrides[get_current_user] = lambda: test_user
    app.dependency_overrides[get_auth_session] = lambda: AuthSession(
        user=test_user, access_token="test-access-token", client=MagicMock()
    )
    yield client
    app.dependency_overrides = {}


@pytest.fixture
def manufacturer_row() -> dict:
    """Profile row for a manufacturer who completed setup."""
    return {
        "id": MANUFACTURER_PROFILE_ID,
        "user_id": str(TEST_USER_ID),
        "name": "Acme Fabrication",
        "user_type": "manufacturer",
        "phone": "9876543210",
        "manufacturer_details": [
            {
                "id": "55555555-5555-4555-8555-555555555555",
                "profile_id": MANUFACTURER_PROFILE_ID,
                "company_name": "Acme Fabrication Pvt Ltd",
                "industry": "Metal works",
                "location": "Pune",
            }
        ],
        "gig_worker_details": [],
    }


@pytest.fixture
def worker_row() -> dict:
    """Profile row for a gig worker who completed setup."""
    return {
        "id": WORKER_PROFILE_ID,
        "user_id": str(TEST_USER_ID),
        "name": "Ravi Kumar",
        "user_type": "gig_worker",
        "phone": None,
        "manufacturer_details": [],
        "gig_worker_details": [
            {
                "id": "66666666-6666-4666-8666-666666666666",
                "profile_id": WORKER_PROFILE_ID,
                "skills": ["welding", "cnc"],
                "experience_years": 4,
                "location": "Pune",
                "hourly_rate": 200.0,
            }
        ],
    }


@pytest.fixture
def job_row() -> dict:
    """Open job posted by the manufacturer profile."""
    return {
        "id": JOB_ID,
        "manufacturer_id": MANUFACTURER_PROFILE_ID,
        "title": "CNC machine operator",
        "description": "Night shift, 3 weeks",
        "location": "Pune",
        "pay_rate": 250.0,
        "required_skills": ["cnc"],
        "status": "open",
        "created_at": "2024-01-01T00:00:00Z",
    }
