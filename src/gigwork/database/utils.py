"""Generic database utility functions for Supabase interactions."""

from typing import Any
from uuid import UUID

from supabase import Client

from src.gigwork.database.connection import get_supabase_admin_client


class SupabaseQueryBuilder:
    """Helper class for building and executing Supabase queries."""

    def __init__(self, client: Client | None = None) -> None:
        """
        Initialize query builder.

        Args:
            client: Supabase client instance (uses the service-role client if None)
        """
        self.client = client or get_supabase_admin_client()

    def get_by_id(
        self, table: str, record_id: UUID | str, columns: str = "*"
    ) -> dict[str, Any] | None:
        """
        Fetch a single record by ID.

        Args:
            table: Table name
            record_id: Record UUID or ID
            columns: Columns to select (default: "*")

        Returns:
            Record dictionary or None if not found

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> job = builder.get_by_id("jobs", job_id)
        """
        response = self.client.table(table).select(columns).eq("id", str(record_id)).execute()
        return response.data[0] if response.data else None

    def get_single(
        self, table: str, field: str, value: Any, columns: str = "*"
    ) -> dict[str, Any]:
        """
        Fetch exactly one record matching a field value.

        Cardinality is enforced by PostgREST: zero or more than one matching
        row is an error rather than None.

        Args:
            table: Table name
            field: Field name to filter by
            value: Field value
            columns: Columns to select, may include embedded relations

        Returns:
            The matching record

        Raises:
            postgrest.exceptions.APIError: If zero or several rows match

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> profile = builder.get_single(
            ...     "profiles",
            ...     "user_id",
            ...     user_id,
            ...     columns="*, manufacturer_details(*), gig_worker_details(*)",
            ... )
        """
        response = self.client.table(table).select(columns).eq(field, value).single().execute()
        return response.data

    def list_records(
        self,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        in_filters: dict[str, list[Any]] | None = None,
        order_by: str | None = None,
        order_desc: bool = True,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """
        List records with optional filtering, ordering, and pagination.

        Args:
            table: Table name
            columns: Columns to select (default: "*")
            filters: Dictionary of field:value pairs for equality filtering
            in_filters: Dictionary of field:values pairs for membership filtering
            order_by: Column to order by
            order_desc: Order descending (default: True)
            limit: Maximum records to return
            offset: Number of records to skip

        Returns:
            List of record dictionaries

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> jobs = builder.list_records(
            ...     "jobs",
            ...     filters={"status": "open"},
            ...     order_by="created_at",
            ...     limit=20
            ... )
        """
        query = self.client.table(table).select(columns)

        if filters:
            for field, value in filters.items():
                query = query.eq(field, value)

        if in_filters:
            for field, values in in_filters.items():
                query = query.in_(field, values)

        if order_by:
            query = query.order(order_by, desc=order_desc)

        if limit is not None:
            query = query.range(offset, offset + limit - 1)

        response = query.execute()
        return response.data

    def insert_record(self, table: str, data: dict[str, Any]) -> dict[str, Any] | None:
        """
        Insert a single record.

        Args:
            table: Table name
            data: Record data dictionary

        Returns:
            Inserted record dictionary or None if failed

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> application = builder.insert_record(
            ...     "applications",
            ...     {"job_id": job_id, "gig_worker_id": profile_id, "status": "pending"}
            ... )
        """
        response = self.client.table(table).insert(data).execute()
        return response.data[0] if response.data else None

    def update_record(
        self, table: str, record_id: UUID | str, data: dict[str, Any]
    ) -> dict[str, Any] | None:
        """
        Update a record by ID.

        Args:
            table: Table name
            record_id: Record UUID or ID
            data: Fields to update

        Returns:
            Updated record dictionary or None if not found
        """
        response = self.client.table(table).update(data).eq("id", str(record_id)).execute()
        return response.data[0] if response.data else None

    def exists(self, table: str, filters: dict[str, Any]) -> bool:
        """
        Check if record(s) exist matching filters.

        Args:
            table: Table name
            filters: Dictionary of field:value pairs for filtering

        Returns:
            True if at least one matching record exists

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> already_applied = builder.exists(
            ...     "applications",
            ...     {"job_id": job_id, "gig_worker_id": profile_id}
            ... )
        """
        query = self.client.table(table).select("id")

        for field, value in filters.items():
            query = query.eq(field, value)

        response = query.limit(1).execute()
        return len(response.data) > 0


def get_query_builder(client: Client | None = None) -> SupabaseQueryBuilder:
    """
    Get instance of SupabaseQueryBuilder.

    Args:
        client: Optional Supabase client (uses default if None)

    Returns:
        SupabaseQueryBuilder instance
    """
    return SupabaseQueryBuilder(client)
