"""
Request validation for job postings and applications.

Each validator trims its input, checks presence and basic format, and
returns the normalized document ready for insertion (without the server
timestamp). Failures raise ValidationError or NotFoundError.
"""

import re
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import NotFoundError, ValidationError
from .repositories.base import DocumentRepositoryInterface

DEFAULT_EMPLOYMENT_TYPE = "Full Time"

JOB_REQUIRED_FIELDS = ("title", "company", "location", "category", "description")
APPLICATION_REQUIRED_FIELDS = ("job_id", "name", "email", "resume_link", "cover_note")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s]+$")

_url_adapter = TypeAdapter(AnyHttpUrl)


def clean_str(value: Any) -> str:
    """Trimmed string form of a value; empty for None."""
    if value is None:
        return ""
    return str(value).strip()


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def is_valid_url(value: str) -> bool:
    """True when the value parses as an absolute http(s) URL."""
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def parse_object_id(value: Any, label: str = "job") -> ObjectId:
    """
    Parse a 24-hex identifier.

    Raises:
        ValidationError: "Invalid <label> ID" when the format is wrong
    """
    text = clean_str(value)
    if not ObjectId.is_valid(text):
        raise ValidationError(f"Invalid {label} ID")
    return ObjectId(text)


def _missing(values: Dict[str, Any], required: Iterable[str]) -> List[str]:
    return [name for name in required if not values.get(name)]


def normalize_categories(category: Any = None, categories: Optional[Iterable[Any]] = None) -> List[str]:
    """
    Merge a single category and a category list into one distinct list.

    Order is preserved; duplicates are dropped case-insensitively keeping
    the first spelling.
    """
    merged: List[str] = []
    seen = set()
    for raw in [category, *(categories or [])]:
        name = clean_str(raw)
        if name and name.lower() not in seen:
            seen.add(name.lower())
            merged.append(name)
    return merged


def validate_job_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a job creation body.

    Raises:
        ValidationError: naming every missing required field, or a bad logo URL
    """
    categories = normalize_categories(payload.get("category"), payload.get("categories"))
    values = {
        "title": clean_str(payload.get("title")),
        "company": clean_str(payload.get("company")),
        "location": clean_str(payload.get("location")),
        "category": categories[0] if categories else "",
        "description": clean_str(payload.get("description")),
    }

    missing = _missing(values, JOB_REQUIRED_FIELDS)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    logo = clean_str(payload.get("logo")) or None
    if logo and not is_valid_url(logo):
        raise ValidationError("Invalid logo URL")

    return {
        "title": values["title"],
        "company": values["company"],
        "location": values["location"],
        "categories": categories,
        "description": values["description"],
        "type": clean_str(payload.get("type")) or DEFAULT_EMPLOYMENT_TYPE,
        "featured": bool(payload.get("featured") or False),
        "logo": logo,
    }


def validate_application_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate an application body. Does not check that the job exists;
    see ``resolve_job_reference``.

    Raises:
        ValidationError: missing fields, malformed email, or malformed resume link
    """
    values = {name: clean_str(payload.get(name)) for name in APPLICATION_REQUIRED_FIELDS}
    values["email"] = values["email"].lower()

    missing = _missing(values, APPLICATION_REQUIRED_FIELDS)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    if not is_valid_email(values["email"]):
        raise ValidationError("Invalid email address")

    if not is_valid_url(values["resume_link"]):
        raise ValidationError("Invalid resume link URL")

    return values


def resolve_job_reference(job_id: str, jobs: DocumentRepositoryInterface) -> Dict[str, Any]:
    """
    Look up the job an application points at.

    A malformed id cannot reference any job, so it is reported the same way
    as a missing one.

    Raises:
        NotFoundError: id is malformed or no such job exists
        StoreError: the lookup itself failed
    """
    if not ObjectId.is_valid(job_id):
        raise NotFoundError("Job not found")

    job = jobs.find_one_by_id(ObjectId(job_id))
    if job is None:
        raise NotFoundError("Job not found")
    return job
