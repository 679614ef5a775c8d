"""API handlers for job listing and posting endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from src.gigwork.auth import AuthorizationError, SessionUser, get_current_user
from src.gigwork.database import get_query_builder
from src.gigwork.database.models import Job, JobStatus
from src.gigwork.features.jobs.models import CreateJobRequest, JobListResponse
from src.gigwork.features.profile.handlers import load_profile_or_404
from src.gigwork.features.profile.service import require_manufacturer
from src.gigwork.services import PostHogService
from src.gigwork.services.rate_limiter import default_rate_limit, write_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
@default_rate_limit
async def list_available_jobs(
    request: Request,
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_user: SessionUser = Depends(get_current_user),
) -> JobListResponse:
    """
    List open job postings, newest first.

    Args:
        limit: Maximum jobs to return
        offset: Number of jobs to skip
        current_user: Authenticated user

    Returns:
        Open jobs

    Raises:
        HTTPException: 500 if database query fails
    """
    try:
        db = get_query_builder()
        records = db.list_records(
            "jobs",
            filters={"status": JobStatus.OPEN.value},
            order_by="created_at",
            limit=limit,
            offset=offset,
        )
    except Exception as e:
        logger.error(f"Error listing jobs: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to fetch jobs",
        ) from e

    jobs = [Job(**record) for record in records]
    return JobListResponse(data=jobs, total=len(jobs))


@router.get("/mine", response_model=JobListResponse)
@default_rate_limit
async def list_my_jobs(
    request: Request,
    current_user: SessionUser = Depends(get_current_user),
) -> JobListResponse:
    """
    List every job posted by the calling manufacturer, any status.

    Raises:
        HTTPException: 403 if the caller is not a manufacturer
        HTTPException: 404 if profile not found
        HTTPException: 500 if database query fails
    """
    profile = load_profile_or_404(current_user)

    try:
        manufacturer = require_manufacturer(profile)
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    try:
        db = get_query_builder()
        records = db.list_records(
            "jobs", filters={"manufacturer_id": str(manufacturer.id)}, order_by="created_at"
        )
    except Exception as e:
        logger.error(f"Error listing jobs for profile {manufacturer.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to fetch your jobs",
        ) from e

    jobs = [Job(**record) for record in records]
    return JobListResponse(data=jobs, total=len(jobs))


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
@write_rate_limit
async def create_job(
    request: Request,
    req: CreateJobRequest,
    current_user: SessionUser = Depends(get_current_user),
) -> Job:
    """
    Post a new job as the calling manufacturer.

    Args:
        req: Job details
        current_user: Authenticated user

    Returns:
        The created job (status "open")

    Raises:
        HTTPException: 400 if profile setup is not complete
        HTTPException: 403 if the caller is not a manufacturer
        HTTPException: 404 if profile not found
        HTTPException: 500 if database operation fails
    """
    profile = load_profile_or_404(current_user)

    try:
        manufacturer = require_manufacturer(profile)
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    if manufacturer.needs_setup:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Complete profile setup before posting jobs.",
        )

    try:
        db = get_query_builder()
        record = db.insert_record(
            "jobs",
            {
                "manufacturer_id": str(manufacturer.id),
                "status": JobStatus.OPEN.value,
                **req.model_dump(exclude_none=True),
            },
        )
    except Exception as e:
        logger.error(f"Error creating job for profile {manufacturer.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create job. Please try again.",
        ) from e

    if not record:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create job. Please try again.",
        )

    job = Job(**record)
    logger.info(f"Job {job.id} created by profile {manufacturer.id}")

    posthog_service = PostHogService()
    posthog_service.capture(
        distinct_id=str(current_user.id),
        event="job_created",
        properties={"job_id": str(job.id), "location": job.location},
    )

    return job
