"""Dashboard feature: session-gated profile view with role-dependent tabs."""

from src.gigwork.features.dashboard.handlers import router

__all__ = ["router"]
