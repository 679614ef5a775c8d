"""Authentication module backed by Supabase auth."""

from src.gigwork.auth.dependencies import get_auth_session, get_current_user
from src.gigwork.auth.exceptions import AuthorizationError
from src.gigwork.auth.models import SessionUser, SignOutResult
from src.gigwork.auth.session import AuthSession

__all__ = [
    "get_auth_session",
    "get_current_user",
    "AuthSession",
    "AuthorizationError",
    "SessionUser",
    "SignOutResult",
]
