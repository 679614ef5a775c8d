"""Tests for database utility functions."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.gigwork.database.utils import SupabaseQueryBuilder, get_query_builder


@pytest.fixture
def mock_client() -> MagicMock:
    """Mock Supabase client."""
    return MagicMock()


@pytest.fixture
def sample_id() -> str:
    """Sample UUID."""
    return str(uuid4())


class TestSupabaseQueryBuilder:
    """Tests for SupabaseQueryBuilder class."""

    def test_get_by_id_found(self, mock_client: MagicMock, sample_id: str) -> None:
        """Test getting record by ID when it exists."""
        mock_client.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            {"id": sample_id, "title": "Welder"}
        ]

        builder = SupabaseQueryBuilder(mock_client)
        result = builder.get_by_id("jobs", sample_id)

        assert result is not None
        assert result["id"] == sample_id
        mock_client.table.assert_called_once_with("jobs")

    def test_get_by_id_not_found(self, mock_client: MagicMock, sample_id: str) -> None:
        """Test getting record by ID when it doesn't exist."""
        mock_client.table().select().eq().execute.return_value.data = []

        builder = SupabaseQueryBuilder(mock_client)
        result = builder.get_by_id("jobs", sample_id)

        assert result is None

    def test_get_single_uses_single_cardinality(self, mock_client: MagicMock) -> None:
        """Test get_single enforces one row and passes embedded columns through."""
        query = mock_client.table.return_value.select.return_value.eq.return_value
        query.single.return_value.execute.return_value.data = {"id": "p1", "name": "Acme"}

        builder = SupabaseQueryBuilder(mock_client)
        result = builder.get_single(
            "profiles", "user_id", "u1", columns="*, manufacturer_details(*)"
        )

        assert result == {"id": "p1", "name": "Acme"}
        mock_client.table.return_value.select.assert_called_once_with("*, manufacturer_details(*)")
        mock_client.table.return_value.select.return_value.eq.assert_called_once_with("user_id", "u1")
        query.single.assert_called_once()

    def test_list_records_with_filters(self, mock_client: MagicMock) -> None:
        """Test listing records with filters, ordering and pagination."""
        mock_client.table.return_value.select.return_value.eq.return_value.order.return_value.range.return_value.execute.return_value.data = [
            {"id": "1", "status": "open"},
            {"id": "2", "status": "open"},
        ]

        builder = SupabaseQueryBuilder(mock_client)
        results = builder.list_records(
            "jobs",
            filters={"status": "open"},
            order_by="created_at",
            limit=20,
            offset=0,
        )

        assert len(results) == 2
        mock_client.table.return_value.select.return_value.eq.return_value.order.assert_called_once_with(
            "created_at", desc=True
        )
        mock_client.table.return_value.select.return_value.eq.return_value.order.return_value.range.assert_called_once_with(
            0, 19
        )

    def test_list_records_with_in_filters(self, mock_client: MagicMock) -> None:
        """Test membership filters are applied with in_."""
        mock_client.table.return_value.select.return_value.in_.return_value.execute.return_value.data = [
            {"id": "a1"}
        ]

        builder = SupabaseQueryBuilder(mock_client)
        results = builder.list_records("applications", in_filters={"job_id": ["j1", "j2"]})

        assert results == [{"id": "a1"}]
        mock_client.table.return_value.select.return_value.in_.assert_called_once_with(
            "job_id", ["j1", "j2"]
        )

    def test_insert_record(self, mock_client: MagicMock, sample_id: str) -> None:
        """Test inserting a record."""
        mock_client.table().insert().execute.return_value.data = [
            {"id": sample_id, "title": "New Job"}
        ]

        builder = SupabaseQueryBuilder(mock_client)
        result = builder.insert_record("jobs", {"title": "New Job", "status": "open"})

        assert result is not None
        assert result["id"] == sample_id

    def test_update_record_not_found(self, mock_client: MagicMock, sample_id: str) -> None:
        """Test updating a record that doesn't exist returns None."""
        mock_client.table().update().eq().execute.return_value.data = []

        builder = SupabaseQueryBuilder(mock_client)
        result = builder.update_record("applications", sample_id, {"status": "accepted"})

        assert result is None

    def test_exists_true(self, mock_client: MagicMock) -> None:
        """Test exists when a matching record is present."""
        mock_client.table().select().eq().eq().limit().execute.return_value.data = [{"id": "x"}]

        builder = SupabaseQueryBuilder(mock_client)

        assert builder.exists("applications", {"job_id": "j1", "gig_worker_id": "w1"}) is True

    def test_exists_false(self, mock_client: MagicMock) -> None:
        """Test exists when nothing matches."""
        mock_client.table().select().eq().limit().execute.return_value.data = []

        builder = SupabaseQueryBuilder(mock_client)

        assert builder.exists("applications", {"job_id": "j1"}) is False


def test_get_query_builder_uses_given_client(mock_client: MagicMock) -> None:
    """Test factory wires the provided client."""
    builder = get_query_builder(mock_client)

    assert isinstance(builder, SupabaseQueryBuilder)
    assert builder.client is mock_client
