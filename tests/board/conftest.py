"""
Pytest fixtures for job board route tests.

Routes run against an in-memory store so no MongoDB server is needed.
The fake repository understands the small filter subset the service
emits: equality, $regex with the "i" option, $or and $and, with array
fields matching when any element matches.
"""

import os
import re

# Set environment variables BEFORE any imports from board_service so the
# cached settings are built from a known configuration.
os.environ["ENVIRONMENT"] = "development"
os.environ["CLIENT_ORIGIN"] = "http://localhost:5173"
os.environ.pop("MONGODB_URI", None)

from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from jobboard.repositories.base import DocumentRepositoryInterface, WriteResult


def _value_matches(value: Any, condition: Any) -> bool:
    if isinstance(value, list):
        return any(_value_matches(item, condition) for item in value)
    if isinstance(condition, dict) and "$regex" in condition:
        flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
        return isinstance(value, str) and re.search(condition["$regex"], value, flags) is not None
    return value == condition


def matches(document: Dict[str, Any], filter: Dict[str, Any]) -> bool:
    for key, condition in filter.items():
        if key == "$and":
            if not all(matches(document, sub) for sub in condition):
                return False
        elif key == "$or":
            if not any(matches(document, sub) for sub in condition):
                return False
        elif key not in document or not _value_matches(document[key], condition):
            return False
    return True


class InMemoryRepository(DocumentRepositoryInterface):
    """Dict-backed repository for route tests."""

    def __init__(self):
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}
        self.indexes: List[List[tuple]] = []

    def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents[document["_id"]] = dict(document)
        return WriteResult(inserted_id=str(document["_id"]))

    def insert_many(self, documents):
        return WriteResult(inserted_ids=[self.insert_one(d).inserted_id for d in documents])

    def find(self, filter, sort=None, limit=0):
        found = [dict(d) for d in self.documents.values() if matches(d, filter)]
        for field, direction in reversed(sort or []):
            found.sort(key=lambda d: d.get(field), reverse=direction < 0)
        return found[:limit] if limit > 0 else found

    def find_one_by_id(self, object_id):
        document = self.documents.get(object_id)
        return dict(document) if document is not None else None

    def delete_one_by_id(self, object_id):
        return WriteResult(deleted_count=1 if self.documents.pop(object_id, None) else 0)

    def delete_many(self, filter):
        doomed = [key for key, d in self.documents.items() if matches(d, filter)]
        for key in doomed:
            del self.documents[key]
        return WriteResult(deleted_count=len(doomed))

    def ensure_indexes(self, indexes):
        self.indexes.extend(indexes)


class FakeStore:
    """Stands in for BoardStore."""

    def __init__(self):
        self.jobs = InMemoryRepository()
        self.applications = InMemoryRepository()
        self.is_connected = False
        self.healthy = True

    def connect(self):
        self.is_connected = True

    def close(self):
        self.is_connected = False

    def ensure_indexes(self):
        self.jobs.ensure_indexes([[("created_at", -1)]])

    def ping(self) -> bool:
        return self.healthy


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client(store):
    """TestClient with the lifespan running against the fake store."""
    from board_service.app import create_app
    from jobboard.config import BoardSettings

    app = create_app(store=store, settings=BoardSettings())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    return {
        "title": "  Platform Engineer ",
        "company": "Acme",
        "location": "Remote",
        "category": "Engineering",
        "description": "Run the platform.",
    }


@pytest.fixture
def create_job(client, job_payload):
    """Post a job and return its id."""

    def _create(**overrides) -> str:
        response = client.post("/api/jobs", json={**job_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()["jobId"]

    return _create


@pytest.fixture
def application_payload():
    def _payload(job_id: Optional[str]) -> Dict[str, Any]:
        return {
            "job_id": job_id,
            "name": "Ada Lovelace",
            "email": "  Ada@Example.COM ",
            "resume_link": "https://example.com/ada.pdf",
            "cover_note": "I would love to join.",
        }

    return _payload
