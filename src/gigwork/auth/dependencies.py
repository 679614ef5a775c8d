"""FastAPI dependencies for bearer-token authentication using Supabase."""

import logging
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.gigwork.auth.models import SessionUser
from src.gigwork.auth.session import AuthSession
from src.gigwork.database import get_supabase_admin_client, get_supabase_client
from src.gigwork.services import PostHogService

# auto_error=False: a missing header yields an anonymous session, not a 403
security = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


async def get_auth_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthSession:
    """
    Resolve the caller's session from the Authorization header.

    The access token is validated remotely by Supabase auth. Missing,
    invalid, or expired tokens all resolve to an anonymous session; callers
    decide whether that means redirect (dashboard) or 401 (everything else).

    Args:
        request: Incoming request; the user is stored on request.state for rate limiting
        credentials: Bearer token from Authorization header, if any

    Returns:
        AuthSession whose user is None when the caller is not authenticated
    """
    if credentials is None:
        return AuthSession(user=None)

    try:
        response = get_supabase_client().auth.get_user(credentials.credentials)
    except Exception as e:
        logger.warning(f"Token validation failed: {str(e)}", extra={"error": str(e)})
        posthog_service = PostHogService()
        posthog_service.capture(
            distinct_id="anonymous",
            event="authentication_failed",
            properties={"error": "token_validation_failed"},
        )
        return AuthSession(user=None)

    if response is None or response.user is None:
        logger.warning(
            "Auth failed: token did not resolve to a user",
            extra={"error_type": "unknown_user"},
        )
        return AuthSession(user=None)

    user = SessionUser(
        id=UUID(str(response.user.id)),
        email=response.user.email,
        user_metadata=response.user.user_metadata or {},
    )
    request.state.user = user
    logger.info(f"User authenticated: {user.id}")

    return AuthSession(
        user=user,
        access_token=credentials.credentials,
        client=get_supabase_admin_client(),
    )


async def get_current_user(session: AuthSession = Depends(get_auth_session)) -> SessionUser:
    """
    Require an authenticated user.

    Args:
        session: Session resolved from the request

    Returns:
        The authenticated SessionUser

    Raises:
        HTTPException: 401 if the caller is not authenticated

    Example:
        @router.get("/jobs/mine")
        async def my_jobs(current_user: SessionUser = Depends(get_current_user)):
            ...
    """
    if session.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session.user
