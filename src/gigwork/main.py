"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.gigwork.config import settings
from src.gigwork.features.applications import router as applications_router
from src.gigwork.features.dashboard import router as dashboard_router
from src.gigwork.features.jobs import router as jobs_router
from src.gigwork.features.profile import router as profile_router
from src.gigwork.services.rate_limiter import limiter

logger = logging.getLogger(__name__)

app = FastAPI(
    title="GigWork API",
    description="Marketplace API connecting manufacturers with gig workers",
    version="0.1.0",
    debug=settings.debug,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

origins = settings.cors_origins.split(",")
logger.info(f"Origins : {origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(dashboard_router, prefix=settings.api_v1_prefix, tags=["dashboard"])
app.include_router(profile_router, prefix=settings.api_v1_prefix, tags=["profile"])
app.include_router(jobs_router, prefix=settings.api_v1_prefix, tags=["jobs"])
app.include_router(applications_router, prefix=settings.api_v1_prefix, tags=["applications"])


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(status="healthy")
