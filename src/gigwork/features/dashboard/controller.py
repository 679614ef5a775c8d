"""Dashboard view controller: session gate, profile load, and role-dependent tabs."""

import logging
from typing import Callable
from uuid import UUID

from src.gigwork.auth.session import AuthSession
from src.gigwork.config import settings
from src.gigwork.database.models import GigWorkerProfile, ManufacturerProfile, UserType
from src.gigwork.features.dashboard.validators import (
    DashboardState,
    DashboardTab,
    DashboardView,
    Notification,
    TabSpec,
)

logger = logging.getLogger(__name__)

ProfileFetcher = Callable[[UUID], ManufacturerProfile | GigWorkerProfile]

_TAB_SPECS: dict[DashboardTab, TabSpec] = {
    DashboardTab.AVAILABLE_JOBS: TabSpec(
        id=DashboardTab.AVAILABLE_JOBS,
        label="Available Jobs",
        title="Available Jobs",
        description="Browse and apply to available job postings",
        endpoint=f"{settings.api_v1_prefix}/jobs",
    ),
    DashboardTab.MY_APPLICATIONS: TabSpec(
        id=DashboardTab.MY_APPLICATIONS,
        label="My Applications",
        title="My Applications",
        description="Track your job applications",
        endpoint=f"{settings.api_v1_prefix}/applications/mine",
    ),
    DashboardTab.MY_JOBS: TabSpec(
        id=DashboardTab.MY_JOBS,
        label="My Jobs",
        title="My Job Postings",
        description="Manage your job postings and applications",
        endpoint=f"{settings.api_v1_prefix}/jobs/mine",
    ),
    DashboardTab.CREATE_JOB: TabSpec(
        id=DashboardTab.CREATE_JOB,
        label="Post Job",
        title="Post a New Job",
        description="Create a job posting to find skilled workers",
        endpoint=f"{settings.api_v1_prefix}/jobs",
    ),
}


def needs_profile_setup(profile: ManufacturerProfile | GigWorkerProfile | None) -> bool:
    """True when neither manufacturer nor gig worker details exist yet."""
    if profile is None:
        return True
    return profile.needs_setup


def tabs_for_role(user_type: UserType | str) -> list[DashboardTab]:
    """
    Tab set for a role.

    Manufacturer-only tabs are omitted entirely for gig workers, not disabled.
    """
    tabs = [DashboardTab.AVAILABLE_JOBS, DashboardTab.MY_APPLICATIONS]
    if user_type == UserType.MANUFACTURER:
        tabs += [DashboardTab.MY_JOBS, DashboardTab.CREATE_JOB]
    return tabs


def default_tab_for_role(user_type: UserType | str) -> DashboardTab:
    if user_type == UserType.MANUFACTURER:
        return DashboardTab.MY_JOBS
    return DashboardTab.AVAILABLE_JOBS


class DashboardController:
    """
    Drives one dashboard render: LOADING -> PROFILE_SETUP | TABBED | ERROR.

    The session is passed in explicitly and the profile read goes through an
    injected fetcher, so the controller itself performs no I/O beyond those
    two collaborators. Navigation is expressed as state.redirect_to and
    toasts as state.notifications; the HTTP layer turns them into responses.

    Example:
        >>> controller = DashboardController(session, fetch_profile)
        >>> state = controller.load()
        >>> state.view
        <DashboardView.TABBED: 'tabbed'>
    """

    def __init__(
        self,
        session: AuthSession,
        fetch_profile: ProfileFetcher,
        login_route: str | None = None,
        landing_route: str | None = None,
    ) -> None:
        self.session = session
        self._fetch_profile = fetch_profile
        self.login_route = login_route or settings.login_route
        self.landing_route = landing_route or settings.landing_route
        self.state = DashboardState()

    def load(self) -> DashboardState:
        """
        Resolve the dashboard state for the current session.

        Without a user the controller redirects to the login route and never
        calls the fetcher. A failed fetch yields the ERROR view with a
        destructive notification; the profile stays unset.

        Returns:
            The resolved dashboard state
        """
        if not self.session.is_authenticated:
            self.state.redirect_to = self.login_route
            return self.state

        user_id = self.session.user.id
        try:
            profile = self._fetch_profile(user_id)
        except Exception as e:
            logger.error(
                f"Error fetching profile: {e}",
                extra={"user_id": str(user_id), "error_type": "profile_fetch_failed"},
            )
            self.state.notifications.append(
                Notification(
                    title="Error",
                    description="Failed to fetch profile",
                    variant="destructive",
                )
            )
            self.state.view = DashboardView.ERROR
            return self.state

        self.state.profile = profile
        self.state.welcome_name = profile.name

        if needs_profile_setup(profile):
            self.state.view = DashboardView.PROFILE_SETUP
            return self.state

        self.state.view = DashboardView.TABBED
        self.state.tabs = [_TAB_SPECS[tab] for tab in tabs_for_role(profile.user_type)]
        self.state.default_tab = default_tab_for_role(profile.user_type)
        return self.state

    def sign_out(self) -> DashboardState:
        """
        Sign the session out.

        On success state.redirect_to is the landing route; on failure the
        error message is surfaced as a destructive notification.
        """
        result = self.session.sign_out()

        if result.error:
            self.state.notifications.append(
                Notification(title="Error", description=result.error, variant="destructive")
            )
            return self.state

        self.state.redirect_to = self.landing_route
        return self.state
