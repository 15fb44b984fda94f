"""
Repository Interface Definitions

Defines the abstract interface for the job board's document collections.
Route handlers and the seed loader depend on this interface only, so tests
can swap in fakes without a MongoDB server.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bson import ObjectId


@dataclass
class WriteResult:
    """
    Result of a write operation.

    Attributes:
        inserted_id: Hex id of the inserted document (insert_one)
        inserted_ids: Hex ids of inserted documents (insert_many)
        deleted_count: Number of documents removed (delete_*)
    """
    inserted_id: Optional[str] = None
    inserted_ids: List[str] = field(default_factory=list)
    deleted_count: int = 0


class DocumentRepositoryInterface(ABC):
    """
    Abstract interface for a single document collection.

    Implementations:
    - MongoDocumentRepository: pymongo collection wrapper

    All methods raise StoreError on database failure.
    """

    @abstractmethod
    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        """
        Insert a single document.

        Args:
            document: Document to insert

        Returns:
            WriteResult with inserted_id set to the new document's _id
        """
        pass

    @abstractmethod
    def insert_many(self, documents: List[Dict[str, Any]]) -> WriteResult:
        """
        Insert several documents in one call.

        Returns:
            WriteResult with inserted_ids in insertion order
        """
        pass

    @abstractmethod
    def find(
        self,
        filter: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents.

        Args:
            filter: MongoDB query filter
            sort: Sort order as list of (field, direction) tuples
            limit: Maximum documents to return (0 = no limit)

        Returns:
            List of matching documents
        """
        pass

    @abstractmethod
    def find_one_by_id(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        """Find a document by its _id. Returns None when absent."""
        pass

    @abstractmethod
    def delete_one_by_id(self, object_id: ObjectId) -> WriteResult:
        """Delete a document by its _id."""
        pass

    @abstractmethod
    def delete_many(self, filter: Dict[str, Any]) -> WriteResult:
        """
        Delete every document matching the filter.

        An empty filter clears the collection.
        """
        pass

    @abstractmethod
    def ensure_indexes(self, indexes: List[List[tuple]]) -> None:
        """Create the given compound indexes if missing."""
        pass
