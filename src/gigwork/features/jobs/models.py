"""Pydantic models for jobs feature."""

from pydantic import BaseModel, Field

from src.gigwork.database.models import Job


class CreateJobRequest(BaseModel):
    """Request model for posting a job."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    location: str | None = Field(None, max_length=255)
    pay_rate: float | None = Field(None, ge=0, description="Offered pay per hour")
    required_skills: list[str] = Field(default_factory=list, max_length=50)

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "title": "CNC machine operator",
                "description": "Night shift, 3 weeks",
                "location": "Pune",
                "pay_rate": 250.0,
                "required_skills": ["cnc", "lathe"],
            }
        }


class JobListResponse(BaseModel):
    """Response for job list endpoints."""

    data: list[Job]
    total: int
