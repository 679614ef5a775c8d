"""Pydantic models for database entities."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field, TypeAdapter


class UserType(str, Enum):
    """Marketplace role of a profile."""

    MANUFACTURER = "manufacturer"
    GIG_WORKER = "gig_worker"


class JobStatus(str, Enum):
    """Job posting lifecycle status."""

    OPEN = "open"
    CLOSED = "closed"


class ApplicationStatus(str, Enum):
    """Application review status."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ManufacturerDetails(BaseModel):
    """Role-specific record created during manufacturer profile setup."""

    id: UUID
    profile_id: UUID
    company_name: str
    industry: str | None = None
    location: str | None = None
    contact_phone: str | None = None
    created_at: datetime | None = None


class GigWorkerDetails(BaseModel):
    """Role-specific record created during gig worker profile setup."""

    id: UUID
    profile_id: UUID
    skills: list[str] = Field(default_factory=list)
    experience_years: int | None = Field(None, ge=0)
    location: str | None = None
    hourly_rate: float | None = Field(None, ge=0)
    created_at: datetime | None = None


class ProfileBase(BaseModel):
    """Fields shared by every profile row, with both joined detail collections."""

    id: UUID
    user_id: UUID
    name: str | None = None
    phone: str | None = None
    created_at: datetime | None = None
    manufacturer_details: list[ManufacturerDetails] = Field(default_factory=list)
    gig_worker_details: list[GigWorkerDetails] = Field(default_factory=list)

    @property
    def needs_setup(self) -> bool:
        """A profile is incomplete until at least one detail record exists."""
        return not self.manufacturer_details and not self.gig_worker_details


class ManufacturerProfile(ProfileBase):
    """Employer profile that posts jobs."""

    user_type: Literal["manufacturer"] = "manufacturer"


class GigWorkerProfile(ProfileBase):
    """Worker profile that applies to jobs."""

    user_type: Literal["gig_worker"] = "gig_worker"


Profile = Annotated[ManufacturerProfile | GigWorkerProfile, Field(discriminator="user_type")]


class Job(BaseModel):
    """Job posting owned by a manufacturer profile."""

    id: UUID
    manufacturer_id: UUID
    title: str
    description: str | None = None
    location: str | None = None
    pay_rate: float | None = None
    required_skills: list[str] = Field(default_factory=list)
    status: JobStatus = JobStatus.OPEN
    created_at: datetime | None = None


class Application(BaseModel):
    """A gig worker's application to a job."""

    id: UUID
    job_id: UUID
    gig_worker_id: UUID
    message: str | None = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: datetime | None = None


_profile_adapter: TypeAdapter[ManufacturerProfile | GigWorkerProfile] = TypeAdapter(Profile)


def parse_profile(data: dict) -> ManufacturerProfile | GigWorkerProfile:
    """Validate a profile row into the variant matching its user_type."""
    return _profile_adapter.validate_python(data)
