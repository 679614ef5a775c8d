"""API handlers for dashboard endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from src.gigwork.auth import AuthSession, get_auth_session
from src.gigwork.features.dashboard.controller import DashboardController
from src.gigwork.features.dashboard.validators import DashboardState, SignOutResponse
from src.gigwork.features.profile.service import fetch_profile
from src.gigwork.services.rate_limiter import default_rate_limit, write_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardState)
@default_rate_limit
async def get_dashboard(
    request: Request,
    session: AuthSession = Depends(get_auth_session),
):
    """
    Get the dashboard view state for the caller.

    - Unauthenticated: 307 redirect to the login route, no profile read.
    - Profile without role details: view "profile_setup".
    - Complete profile: view "tabbed" with the role's tab set and default tab.
    - Profile read failed: view "error" with a destructive notification.

    Args:
        session: Session resolved from the Authorization header

    Returns:
        DashboardState, or a redirect when no user is signed in
    """
    controller = DashboardController(session, fetch_profile)
    state = controller.load()

    if state.redirect_to:
        return RedirectResponse(state.redirect_to, status_code=status.HTTP_307_TEMPORARY_REDIRECT)

    return state


@router.post("/sign-out", response_model=SignOutResponse)
@write_rate_limit
async def sign_out(
    request: Request,
    session: AuthSession = Depends(get_auth_session),
):
    """
    Sign the caller out and send them to the landing route.

    Args:
        session: Session resolved from the Authorization header

    Returns:
        303 redirect to the landing route on success, otherwise a
        SignOutResponse carrying the error notification
    """
    controller = DashboardController(session, fetch_profile)
    state = controller.sign_out()

    if state.redirect_to:
        return RedirectResponse(state.redirect_to, status_code=status.HTTP_303_SEE_OTHER)

    return SignOutResponse(success=False, notifications=state.notifications)
