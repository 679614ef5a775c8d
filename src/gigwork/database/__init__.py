"""Database connection and models."""

from src.gigwork.database.connection import get_supabase_admin_client, get_supabase_client
from src.gigwork.database.utils import SupabaseQueryBuilder, get_query_builder

__all__ = [
    "get_supabase_client",
    "get_supabase_admin_client",
    "SupabaseQueryBuilder",
    "get_query_builder",
]
