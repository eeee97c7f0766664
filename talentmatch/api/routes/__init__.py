"""API routers."""

from .candidates import router as candidates_router
from .jobs import router as jobs_router

__all__ = ["candidates_router", "jobs_router"]
