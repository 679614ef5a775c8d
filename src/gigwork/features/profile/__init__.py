"""Profile feature: combined profile reads and profile setup."""

from src.gigwork.features.profile.handlers import router

__all__ = ["router"]
