"""Pydantic validators for dashboard API endpoints."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from src.gigwork.database.models import Profile


class DashboardView(str, Enum):
    """Which screen the dashboard renders."""

    LOADING = "loading"
    PROFILE_SETUP = "profile_setup"
    TABBED = "tabbed"
    ERROR = "error"


class DashboardTab(str, Enum):
    """Tab identifiers of the tabbed dashboard."""

    AVAILABLE_JOBS = "available-jobs"
    MY_APPLICATIONS = "my-applications"
    MY_JOBS = "my-jobs"
    CREATE_JOB = "create-job"


class Notification(BaseModel):
    """Transient user-visible message (toast)."""

    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class TabSpec(BaseModel):
    """One dashboard tab and the API surface its content is loaded from."""

    id: DashboardTab
    label: str
    title: str
    description: str
    endpoint: str = Field(description="API path the tab's list/create component talks to")


class DashboardState(BaseModel):
    """Response model for GET /api/v1/dashboard endpoint."""

    view: DashboardView = DashboardView.LOADING
    profile: Profile | None = None
    welcome_name: str | None = None
    tabs: list[TabSpec] = Field(default_factory=list)
    default_tab: DashboardTab | None = None
    notifications: list[Notification] = Field(default_factory=list)
    redirect_to: str | None = None


class SignOutResponse(BaseModel):
    """Response for a sign-out attempt that did not redirect."""

    success: bool
    notifications: list[Notification] = Field(default_factory=list)
