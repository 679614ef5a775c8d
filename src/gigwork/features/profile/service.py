"""Profile lookups and setup shared by the dashboard, jobs and applications features."""

import logging
from uuid import UUID

from postgrest.exceptions import APIError

from src.gigwork.auth.exceptions import AuthorizationError
from src.gigwork.database import SupabaseQueryBuilder, get_query_builder
from src.gigwork.database.models import (
    GigWorkerProfile,
    ManufacturerProfile,
    UserType,
    parse_profile,
)
from src.gigwork.features.profile.exceptions import (
    ProfileAlreadyCompleteError,
    ProfileNotFoundError,
    ProfileSetupError,
)
from src.gigwork.features.profile.models import ProfileSetupRequest

logger = logging.getLogger(__name__)

# Profile row plus both role-specific detail collections
PROFILE_COLUMNS = "*, manufacturer_details(*), gig_worker_details(*)"

# PostgREST error code for .single() matching zero or several rows
NO_SINGLE_ROW_CODE = "PGRST116"


def fetch_profile(
    user_id: UUID | str, db: SupabaseQueryBuilder | None = None
) -> ManufacturerProfile | GigWorkerProfile:
    """
    Fetch the combined profile for a user in a single read.

    Args:
        user_id: Supabase auth user ID (profiles.user_id)
        db: Query builder (uses default if None)

    Returns:
        Profile variant matching the row's user_type

    Raises:
        ProfileNotFoundError: If zero or several profile rows match
        APIError: For any other PostgREST failure
    """
    db = db or get_query_builder()

    try:
        data = db.get_single("profiles", "user_id", str(user_id), columns=PROFILE_COLUMNS)
    except APIError as e:
        if e.code == NO_SINGLE_ROW_CODE:
            raise ProfileNotFoundError(f"No single profile for user {user_id}") from e
        raise

    if not data:
        raise ProfileNotFoundError(f"No single profile for user {user_id}")

    return parse_profile(data)


def require_manufacturer(
    profile: ManufacturerProfile | GigWorkerProfile,
) -> ManufacturerProfile:
    """Narrow a profile to a manufacturer or raise AuthorizationError."""
    if not isinstance(profile, ManufacturerProfile):
        raise AuthorizationError("Only manufacturers can perform this action")
    return profile


def require_gig_worker(profile: ManufacturerProfile | GigWorkerProfile) -> GigWorkerProfile:
    """Narrow a profile to a gig worker or raise AuthorizationError."""
    if not isinstance(profile, GigWorkerProfile):
        raise AuthorizationError("Only gig workers can perform this action")
    return profile


def complete_profile_setup(
    profile: ManufacturerProfile | GigWorkerProfile,
    req: ProfileSetupRequest,
    db: SupabaseQueryBuilder | None = None,
) -> ManufacturerProfile | GigWorkerProfile:
    """
    Insert the role-specific detail record and return the refreshed profile.

    Optional name/phone updates are written only after the details insert
    succeeds.

    Args:
        profile: Current profile of the caller
        req: Setup request; must carry exactly the details block for the profile's role
        db: Query builder (uses default if None)

    Returns:
        Profile re-read after the insert

    Raises:
        ProfileAlreadyCompleteError: If the profile already has role details
        ProfileSetupError: If the role's details block is missing or the other role's is present
    """
    if not profile.needs_setup:
        raise ProfileAlreadyCompleteError(f"Profile {profile.id} has already completed setup")

    db = db or get_query_builder()

    if profile.user_type == UserType.MANUFACTURER:
        if req.gig_worker_details is not None:
            raise ProfileSetupError("gig_worker_details is not allowed for manufacturer profiles")
        if req.manufacturer_details is None:
            raise ProfileSetupError("manufacturer_details is required for manufacturer profiles")
        table = "manufacturer_details"
        details = req.manufacturer_details.model_dump(exclude_none=True)
    else:
        if req.manufacturer_details is not None:
            raise ProfileSetupError("manufacturer_details is not allowed for gig worker profiles")
        if req.gig_worker_details is None:
            raise ProfileSetupError("gig_worker_details is required for gig worker profiles")
        table = "gig_worker_details"
        details = req.gig_worker_details.model_dump(exclude_none=True)

    db.insert_record(table, {"profile_id": str(profile.id), **details})

    profile_updates = req.model_dump(include={"name", "phone"}, exclude_none=True)
    if profile_updates:
        db.update_record("profiles", profile.id, profile_updates)

    logger.info(
        f"Profile setup completed for profile {profile.id}",
        extra={"user_type": profile.user_type, "table": table},
    )

    return fetch_profile(profile.user_id, db)
