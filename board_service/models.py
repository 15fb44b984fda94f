"""
Pydantic models for the job board API.

Request models accept every field as optional so the validation layer can
report all missing fields at once with a 400 instead of FastAPI's 422.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, Field

from jobboard.validation import normalize_categories


class JobCreateRequest(BaseModel):
    """Request body for posting a job."""

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = Field(None, description="Primary category")
    categories: Optional[List[str]] = Field(None, description="Additional categories")
    description: Optional[str] = None
    type: Optional[str] = Field(None, description="Employment type, default 'Full Time'")
    featured: Optional[bool] = False
    logo: Optional[str] = Field(None, description="Company logo URL")


class ApplicationCreateRequest(BaseModel):
    """Request body for applying to a job."""

    job_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    resume_link: Optional[str] = None
    cover_note: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class JobListResponse(BaseModel):
    jobs: List[Dict[str, Any]]
    total: int


class JobCreateResponse(BaseModel):
    message: str
    jobId: str
    job: Dict[str, Any]


class ApplicationCreateResponse(BaseModel):
    message: str
    applicationId: str


class ApplicationListResponse(BaseModel):
    applications: List[Dict[str, Any]]
    total: int


class SeedResponse(BaseModel):
    message: str
    count: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str
    timestamp: datetime


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Render ObjectIds as hex strings and datetimes as ISO-8601."""
    serialized = {}
    for key, value in document.items():
        if isinstance(value, ObjectId):
            value = str(value)
        elif isinstance(value, datetime):
            value = value.isoformat()
        serialized[key] = value
    return serialized


def serialize_job(document: Dict[str, Any]) -> Dict[str, Any]:
    """
    Serialize a job, folding a legacy single ``category`` into ``categories``.
    """
    job = serialize_document(document)
    job["categories"] = normalize_categories(job.pop("category", None), job.get("categories"))
    return job
