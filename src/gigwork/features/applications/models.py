"""Pydantic models for applications feature."""

from pydantic import BaseModel, Field, field_validator

from src.gigwork.database.models import Application, ApplicationStatus


class ApplyRequest(BaseModel):
    """Request model for applying to a job."""

    message: str | None = Field(None, max_length=1000, description="Note to the manufacturer")


class ApplicationStatusUpdate(BaseModel):
    """Request model for a manufacturer's decision on an application."""

    status: ApplicationStatus

    @field_validator("status")
    @classmethod
    def status_must_be_decision(cls, value: ApplicationStatus) -> ApplicationStatus:
        if value == ApplicationStatus.PENDING:
            raise ValueError("status must be 'accepted' or 'rejected'")
        return value


class ApplicationSummary(Application):
    """Application with the title of the job it targets."""

    job_title: str | None = None


class ApplicationListResponse(BaseModel):
    """Response for application list endpoint."""

    data: list[ApplicationSummary]
    total: int
