"""
Board Store

Owns the MongoClient for the process and exposes one repository per
collection. Created and connected in the application lifespan, closed on
shutdown, and injected into route handlers.
"""

import logging
from typing import Optional

from pymongo import DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from ..errors import StoreError
from .mongo_repository import MongoDocumentRepository

logger = logging.getLogger(__name__)

JOBS_COLLECTION = "jobs"
APPLICATIONS_COLLECTION = "applications"


class BoardStore:
    """
    Connection handle for the job board database.

    Usage:
        store = BoardStore(uri, "jobBoard")
        store.connect()
        store.jobs.find({})
        store.close()
    """

    def __init__(self, mongodb_uri: str, database: str = "jobBoard"):
        self._mongodb_uri = mongodb_uri
        self._database_name = database
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None
        self._jobs: Optional[MongoDocumentRepository] = None
        self._applications: Optional[MongoDocumentRepository] = None

    @classmethod
    def from_settings(cls, settings) -> "BoardStore":
        """Build a store from BoardSettings."""
        return cls(settings.mongodb_connection_uri, settings.mongo_db_name)

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> None:
        """
        Open the client and bind the collections.

        Calling connect on an already connected store is a no-op.

        Raises:
            StoreError: the URI is malformed or its SRV record cannot be
                resolved. The store stays unconnected.
        """
        if self._client is not None:
            return

        try:
            client = MongoClient(
                self._mongodb_uri,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
            )
        except PyMongoError as e:
            logger.error(f"MongoDB client setup failed: {e}")
            raise StoreError("Could not connect to the database") from e

        self._client = client
        self._db = self._client[self._database_name]
        self._jobs = MongoDocumentRepository(self._db[JOBS_COLLECTION])
        self._applications = MongoDocumentRepository(self._db[APPLICATIONS_COLLECTION])
        logger.info(f"Board store connected: database={self._database_name}")

    def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self._client is not None:
            self._client.close()
            logger.info("Board store connection closed")
        self._client = None
        self._db = None
        self._jobs = None
        self._applications = None

    def _require_connection(self) -> None:
        if self._client is None:
            raise StoreError("Database connection is not open")

    @property
    def jobs(self) -> MongoDocumentRepository:
        self._require_connection()
        return self._jobs

    @property
    def applications(self) -> MongoDocumentRepository:
        self._require_connection()
        return self._applications

    def ping(self) -> bool:
        """Return True when the server answers a ping."""
        self._require_connection()
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def ensure_indexes(self) -> None:
        """Create the indexes list and filter queries rely on."""
        self.jobs.ensure_indexes([[("created_at", DESCENDING)]])
        self.applications.ensure_indexes([
            [("created_at", DESCENDING)],
            [("job_id", 1), ("created_at", DESCENDING)],
        ])
