"""
Seed Route

Endpoints:
    POST /api/seed   - Replace all jobs with the sample set
"""

from fastapi import APIRouter, Depends

from jobboard.repositories import BoardStore
from jobboard.seed import seed_jobs

from ..dependencies import get_store
from ..models import SeedResponse

router = APIRouter(prefix="/api/seed", tags=["seed"])


@router.post("", response_model=SeedResponse)
def seed(store: BoardStore = Depends(get_store)):
    count = seed_jobs(store.jobs)
    return SeedResponse(message=f"Seeded {count} jobs", count=count)
