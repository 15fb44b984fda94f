"""
Application Routes

Endpoints:
    POST /api/applications            - Apply to a job
    GET  /api/applications            - List every application
    GET  /api/applications/{job_id}   - List applications for one job
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from pymongo import DESCENDING

from jobboard.repositories import BoardStore
from jobboard.validation import (
    parse_object_id,
    resolve_job_reference,
    validate_application_payload,
)

from ..dependencies import get_store
from ..models import (
    ApplicationCreateRequest,
    ApplicationCreateResponse,
    ApplicationListResponse,
    serialize_document,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["applications"])

NEWEST_FIRST = [("created_at", DESCENDING)]


@router.post("", status_code=201, response_model=ApplicationCreateResponse)
def submit_application(
    request: ApplicationCreateRequest,
    store: BoardStore = Depends(get_store),
):
    """
    Submit an application.

    Field checks run before the job lookup, so a malformed email is a 400
    even when the job does not exist.
    """
    document = validate_application_payload(request.model_dump())
    job = resolve_job_reference(document["job_id"], store.jobs)

    document["job_id"] = str(job["_id"])
    document["created_at"] = datetime.utcnow()
    result = store.applications.insert_one(document)
    logger.info(f"Application {result.inserted_id} submitted for job {document['job_id']}")

    return ApplicationCreateResponse(
        message="Application submitted successfully",
        applicationId=result.inserted_id,
    )


@router.get("", response_model=ApplicationListResponse)
def list_applications(store: BoardStore = Depends(get_store)):
    """List every application, newest first."""
    applications = store.applications.find({}, sort=NEWEST_FIRST)
    return ApplicationListResponse(
        applications=[serialize_document(a) for a in applications],
        total=len(applications),
    )


@router.get("/{job_id}", response_model=ApplicationListResponse)
def list_applications_for_job(job_id: str, store: BoardStore = Depends(get_store)):
    """List applications for one job, newest first. The job need not exist."""
    object_id = parse_object_id(job_id)
    applications = store.applications.find({"job_id": str(object_id)}, sort=NEWEST_FIRST)
    return ApplicationListResponse(
        applications=[serialize_document(a) for a in applications],
        total=len(applications),
    )
