"""API handlers for profile and profile setup endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.gigwork.auth import SessionUser, get_current_user
from src.gigwork.database.models import GigWorkerProfile, ManufacturerProfile, Profile
from src.gigwork.features.profile.exceptions import (
    ProfileAlreadyCompleteError,
    ProfileNotFoundError,
    ProfileSetupError,
)
from src.gigwork.features.profile.models import ProfileSetupRequest
from src.gigwork.features.profile.service import complete_profile_setup, fetch_profile
from src.gigwork.services import PostHogService
from src.gigwork.services.rate_limiter import default_rate_limit, write_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


def load_profile_or_404(current_user: SessionUser) -> ManufacturerProfile | GigWorkerProfile:
    """
    Fetch the caller's profile, mapping lookup failures to HTTP errors.

    Raises:
        HTTPException: 404 if no profile exists
        HTTPException: 500 if the database query fails
    """
    try:
        return fetch_profile(current_user.id)
    except ProfileNotFoundError as e:
        logger.warning(f"Profile not found for user {current_user.id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User profile not found.",
        ) from e
    except Exception as e:
        logger.error(f"Error fetching profile for user {current_user.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch profile",
        ) from e


@router.get("/me", response_model=Profile)
@default_rate_limit
async def get_my_profile(
    request: Request,
    current_user: SessionUser = Depends(get_current_user),
) -> ManufacturerProfile | GigWorkerProfile:
    """
    Get the caller's profile with both role-specific detail collections.

    Args:
        current_user: Authenticated user

    Returns:
        Manufacturer or gig worker profile

    Raises:
        HTTPException: 404 if profile not found
        HTTPException: 500 if database error occurs
    """
    return load_profile_or_404(current_user)


@router.post("/setup", response_model=Profile)
@write_rate_limit
async def setup_profile(
    request: Request,
    req: ProfileSetupRequest,
    current_user: SessionUser = Depends(get_current_user),
) -> ManufacturerProfile | GigWorkerProfile:
    """
    Complete profile setup by adding the role-specific details record.

    The request must include the details block matching the profile's
    user_type (manufacturer_details or gig_worker_details) and not the other one.

    Args:
        req: Setup data
        current_user: Authenticated user

    Returns:
        Refreshed profile, which no longer needs setup

    Raises:
        HTTPException: 400 if the details block does not match the role
        HTTPException: 404 if profile not found
        HTTPException: 409 if setup was already completed
        HTTPException: 500 if database operation fails
    """
    profile = load_profile_or_404(current_user)

    try:
        updated = complete_profile_setup(profile, req)
    except ProfileAlreadyCompleteError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Profile setup has already been completed.",
        ) from e
    except ProfileSetupError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Error completing setup for user {current_user.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to complete profile setup. Please try again.",
        ) from e

    posthog_service = PostHogService()
    posthog_service.capture(
        distinct_id=str(current_user.id),
        event="profile_setup_completed",
        properties={"user_type": updated.user_type},
    )

    return updated
