"""PostHog analytics service for event tracking."""

import posthog

from src.gigwork.config import settings


class PostHogService:
    """Service for tracking analytics and operator events via PostHog."""

    def __init__(self) -> None:
        """Initialize PostHog service."""
        if settings.posthog_api_key:
            posthog.api_key = settings.posthog_api_key
            posthog.host = settings.posthog_host

    def capture(self, distinct_id: str, event: str, properties: dict | None = None) -> None:
        """
        Track an event.

        Args:
            distinct_id: Unique identifier for the user (or "anonymous")
            event: Event name (e.g., "application_created", "whatsapp_notification_failed")
            properties: Optional event properties

        Example:
            >>> service = PostHogService()
            >>> service.capture(
            ...     "user-123",
            ...     "job_created",
            ...     {"job_id": "abc", "location": "Pune"}
            ... )
        """
        if not settings.posthog_api_key:
            return

        posthog.capture(distinct_id=distinct_id, event=event, properties=properties or {})
