"""
Job Routes

Endpoints:
    GET    /api/jobs        - List jobs with keyword/location/category/featured filters
    GET    /api/jobs/{id}   - Get a single job
    POST   /api/jobs        - Post a job
    DELETE /api/jobs/{id}   - Delete a job
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from jobboard.errors import NotFoundError
from jobboard.job_query import JobQuery
from jobboard.repositories import BoardStore
from jobboard.validation import parse_object_id, validate_job_payload

from ..dependencies import get_store
from ..models import (
    JobCreateRequest,
    JobCreateResponse,
    JobListResponse,
    MessageResponse,
    serialize_job,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
def list_jobs(
    keyword: Optional[str] = Query(None, description="Matches title, company or description"),
    location: Optional[str] = Query(None, description="Matches location"),
    category: Optional[str] = Query(None, description="Matches category"),
    featured: Optional[str] = Query(None, description="'true' for featured jobs only"),
    limit: Optional[str] = Query(None, description="Maximum results, positive integer"),
    sort: Optional[str] = Query(None, description="Ignored; results are newest first"),
    store: BoardStore = Depends(get_store),
):
    """
    List jobs, newest first.

    All supplied filters must hold. Text filters are case-insensitive
    substring matches.
    """
    query = JobQuery.from_params(
        keyword=keyword,
        location=location,
        category=category,
        featured=featured,
        limit=limit,
        sort=sort,
    )
    jobs = store.jobs.find(query.to_filter(), sort=query.sort_spec(), limit=query.limit)
    return JobListResponse(jobs=[serialize_job(job) for job in jobs], total=len(jobs))


@router.get("/{job_id}")
def get_job(job_id: str, store: BoardStore = Depends(get_store)):
    """Get a job by id."""
    job = store.jobs.find_one_by_id(parse_object_id(job_id))
    if job is None:
        raise NotFoundError("Job not found")
    return serialize_job(job)


@router.post("", status_code=201, response_model=JobCreateResponse)
def create_job(request: JobCreateRequest, store: BoardStore = Depends(get_store)):
    """Validate and insert a job posting."""
    document = validate_job_payload(request.model_dump())
    document["created_at"] = datetime.utcnow()

    result = store.jobs.insert_one(document)
    job = {**document, "_id": result.inserted_id}
    logger.info(f"Created job {result.inserted_id}: {document['title']} @ {document['company']}")

    return JobCreateResponse(
        message="Job created successfully",
        jobId=result.inserted_id,
        job=serialize_job(job),
    )


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(job_id: str, store: BoardStore = Depends(get_store)):
    """Delete a job by id."""
    result = store.jobs.delete_one_by_id(parse_object_id(job_id))
    if result.deleted_count == 0:
        raise NotFoundError("Job not found")

    logger.info(f"Deleted job {job_id}")
    return MessageResponse(message="Job deleted successfully")
