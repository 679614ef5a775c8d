"""Jobs feature: available jobs, my jobs, and job posting."""

from src.gigwork.features.jobs.handlers import router

__all__ = ["router"]
