"""
Repository Pattern for MongoDB Operations

Public API:
- BoardStore: connection handle owning the jobs/applications repositories
- DocumentRepositoryInterface: abstract interface for one collection
- MongoDocumentRepository: pymongo implementation
- WriteResult: result dataclass for write operations

Usage:
    from jobboard.repositories import BoardStore

    store = BoardStore.from_settings(get_settings())
    store.connect()
    job = store.jobs.find_one_by_id(ObjectId(job_id))
"""

from .base import DocumentRepositoryInterface, WriteResult
from .mongo_repository import MongoDocumentRepository
from .store import APPLICATIONS_COLLECTION, JOBS_COLLECTION, BoardStore

__all__ = [
    "BoardStore",
    "DocumentRepositoryInterface",
    "MongoDocumentRepository",
    "WriteResult",
    "JOBS_COLLECTION",
    "APPLICATIONS_COLLECTION",
]
