"""Pydantic models for profile feature."""

from pydantic import BaseModel, Field


class ManufacturerSetupDetails(BaseModel):
    """Details collected from a manufacturer during profile setup."""

    company_name: str = Field(min_length=1, max_length=255)
    industry: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    contact_phone: str | None = Field(None, max_length=32)


class GigWorkerSetupDetails(BaseModel):
    """Details collected from a gig worker during profile setup."""

    skills: list[str] = Field(default_factory=list, max_length=50)
    experience_years: int | None = Field(None, ge=0, le=80)
    location: str | None = Field(None, max_length=255)
    hourly_rate: float | None = Field(None, ge=0)


class ProfileSetupRequest(BaseModel):
    """Request model for completing profile setup."""

    name: str | None = Field(None, max_length=255, description="Display name (optional update)")
    phone: str | None = Field(None, max_length=32, description="Phone number (optional update)")
    manufacturer_details: ManufacturerSetupDetails | None = None
    gig_worker_details: GigWorkerSetupDetails | None = None

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "name": "Acme Fabrication",
                "phone": "9876543210",
                "manufacturer_details": {
                    "company_name": "Acme Fabrication Pvt Ltd",
                    "industry": "Metal works",
                    "location": "Pune",
                },
            }
        }
