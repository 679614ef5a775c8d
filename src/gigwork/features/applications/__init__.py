"""Applications feature: apply, list, and review job applications."""

from src.gigwork.features.applications.handlers import router

__all__ = ["router"]
