"""Data models for authentication."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel


class SessionUser(BaseModel):
    """
    Identity of the caller as reported by Supabase auth.

    Attributes:
        id: User UUID (auth.users.id, referenced by profiles.user_id)
        email: User email, absent for phone-only sign-ups
        user_metadata: Additional metadata set at sign-up (name, user_type, etc.)

    Example:
        >>> user = SessionUser(
        ...     id=UUID("123e4567-e89b-12d3-a456-426614174000"),
        ...     email="owner@acme.in",
        ...     user_metadata={"name": "Acme Fabrication"}
        ... )
    """

    id: UUID
    email: str | None = None
    user_metadata: dict[str, Any] = {}


class SignOutResult(BaseModel):
    """Outcome of a sign-out call; error is set when the auth service refused it."""

    error: str | None = None
