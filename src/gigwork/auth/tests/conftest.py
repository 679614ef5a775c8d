"""Shared fixtures for authentication tests."""

from unittest.mock import Mock
from uuid import UUID

import pytest


@pytest.fixture
def mock_user_id() -> UUID:
    """Provide a consistent test user ID."""
    return UUID("123e4567-e89b-12d3-a456-426614174000")


@pytest.fixture
def valid_access_token() -> str:
    """Provide a mock access token for testing."""
    return "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.mock.token"


@pytest.fixture
def mock_supabase_client(mock_user_id: UUID) -> Mock:
    """Mock Supabase client whose auth resolves tokens to mock_user_id."""
    mock_client = Mock()
    mock_user = Mock()
    mock_user.id = str(mock_user_id)
    mock_user.email = "test@example.com"
    mock_user.user_metadata = {"name": "Test User"}
    mock_client.auth.get_user.return_value = Mock(user=mock_user)
    return mock_client


@pytest.fixture
def mock_request() -> Mock:
    """Mock request with a writable state namespace."""
    request = Mock()
    request.state = Mock(spec=[])
    return request
