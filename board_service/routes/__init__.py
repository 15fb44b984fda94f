"""
Job board route modules.

Each module handles one resource under /api.
"""

from .applications import router as applications_router
from .jobs import router as jobs_router
from .seed import router as seed_router

__all__ = [
    "jobs_router",
    "applications_router",
    "seed_router",
]
