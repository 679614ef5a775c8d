"""API handlers for job application endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from postgrest.exceptions import APIError

from src.gigwork.auth import AuthorizationError, SessionUser, get_current_user
from src.gigwork.database import get_query_builder
from src.gigwork.database.models import (
    Application,
    ApplicationStatus,
    Job,
    JobStatus,
    ManufacturerProfile,
)
from src.gigwork.features.applications.models import (
    ApplicationListResponse,
    ApplicationStatusUpdate,
    ApplicationSummary,
    ApplyRequest,
)
from src.gigwork.features.applications.service import notify_manufacturer
from src.gigwork.features.profile.handlers import load_profile_or_404
from src.gigwork.features.profile.service import require_gig_worker, require_manufacturer
from src.gigwork.services import PostHogService
from src.gigwork.services.rate_limiter import default_rate_limit, write_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(tags=["applications"])

# Postgres unique_violation, raised when an insert races the duplicate check
UNIQUE_VIOLATION_CODE = "23505"


def _to_summary(record: dict) -> ApplicationSummary:
    job = record.pop("jobs", None) or {}
    return ApplicationSummary(**record, job_title=job.get("title"))


@router.get("/applications/mine", response_model=ApplicationListResponse)
@default_rate_limit
async def list_my_applications(
    request: Request,
    current_user: SessionUser = Depends(get_current_user),
) -> ApplicationListResponse:
    """
    List applications scoped to the caller's profile.

    Gig workers see the applications they submitted; manufacturers see the
    applications received on their jobs. Newest first.

    Raises:
        HTTPException: 404 if profile not found
        HTTPException: 500 if database query fails
    """
    profile = load_profile_or_404(current_user)

    try:
        db = get_query_builder()

        if isinstance(profile, ManufacturerProfile):
            jobs = db.list_records(
                "jobs", columns="id", filters={"manufacturer_id": str(profile.id)}
            )
            if not jobs:
                return ApplicationListResponse(data=[], total=0)
            records = db.list_records(
                "applications",
                columns="*, jobs(title)",
                in_filters={"job_id": [job["id"] for job in jobs]},
                order_by="created_at",
            )
        else:
            records = db.list_records(
                "applications",
                columns="*, jobs(title)",
                filters={"gig_worker_id": str(profile.id)},
                order_by="created_at",
            )

    except Exception as e:
        logger.error(f"Error listing applications for profile {profile.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to fetch applications",
        ) from e

    applications = [_to_summary(record) for record in records]
    return ApplicationListResponse(data=applications, total=len(applications))


@router.post(
    "/jobs/{job_id}/applications",
    response_model=Application,
    status_code=status.HTTP_201_CREATED,
)
@write_rate_limit
async def apply_to_job(
    request: Request,
    job_id: UUID,
    req: ApplyRequest,
    current_user: SessionUser = Depends(get_current_user),
) -> Application:
    """
    Apply to an open job as the calling gig worker.

    After the application is stored, the job's manufacturer is alerted over
    WhatsApp through the relay function. A failed alert does not fail the
    request.

    Args:
        job_id: Target job
        req: Optional application message
        current_user: Authenticated user

    Returns:
        The created application (status "pending")

    Raises:
        HTTPException: 400 if profile setup is not complete
        HTTPException: 403 if the caller is not a gig worker
        HTTPException: 404 if the job does not exist or is closed
        HTTPException: 409 if the caller already applied
        HTTPException: 500 if database operation fails
    """
    profile = load_profile_or_404(current_user)

    try:
        worker = require_gig_worker(profile)
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    if worker.needs_setup:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Complete profile setup before applying to jobs.",
        )

    try:
        db = get_query_builder()

        job_data = db.get_by_id("jobs", job_id)
        if not job_data or job_data.get("status") != JobStatus.OPEN.value:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Job not found or no longer open.",
            )
        job = Job(**job_data)

        if db.exists("applications", {"job_id": str(job.id), "gig_worker_id": str(worker.id)}):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="You have already applied to this job.",
            )

        try:
            record = db.insert_record(
                "applications",
                {
                    "job_id": str(job.id),
                    "gig_worker_id": str(worker.id),
                    "message": req.message,
                    "status": ApplicationStatus.PENDING.value,
                },
            )
        except APIError as e:
            if e.code != UNIQUE_VIOLATION_CODE:
                raise
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="You have already applied to this job.",
            ) from e
        if not record:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to submit application. Please try again.",
            )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error applying to job {job_id} for user {current_user.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit application. Please try again.",
        ) from e

    application = Application(**record)
    logger.info(f"Application {application.id} created for job {job.id}")

    notified = await notify_manufacturer(job, worker, req.message, db)

    posthog_service = PostHogService()
    posthog_service.capture(
        distinct_id=str(current_user.id),
        event="application_created",
        properties={"job_id": str(job.id), "notification_delivered": notified},
    )

    return application


@router.patch("/applications/{application_id}", response_model=Application)
@write_rate_limit
async def update_application_status(
    request: Request,
    application_id: UUID,
    req: ApplicationStatusUpdate,
    current_user: SessionUser = Depends(get_current_user),
) -> Application:
    """
    Accept or reject an application to one of the caller's jobs.

    Raises:
        HTTPException: 403 if the caller is not a manufacturer
        HTTPException: 404 if the application does not target the caller's jobs
        HTTPException: 500 if database operation fails
    """
    profile = load_profile_or_404(current_user)

    try:
        manufacturer = require_manufacturer(profile)
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    try:
        db = get_query_builder()

        existing = db.get_by_id(
            "applications", application_id, columns="*, jobs(manufacturer_id)"
        )
        job = (existing or {}).get("jobs") or {}
        if not existing or job.get("manufacturer_id") != str(manufacturer.id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Application not found.",
            )

        record = db.update_record("applications", application_id, {"status": req.status.value})
        if not record:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Application not found.",
            )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating application {application_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update application. Please try again.",
        ) from e

    logger.info(f"Application {application_id} marked {req.status.value}")
    return Application(**record)
