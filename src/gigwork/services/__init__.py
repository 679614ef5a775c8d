"""Shared services module for external integrations."""

from src.gigwork.services.posthog import PostHogService
from src.gigwork.services.whatsapp import WhatsAppService

__all__ = [
    "PostHogService",
    "WhatsAppService",
]
