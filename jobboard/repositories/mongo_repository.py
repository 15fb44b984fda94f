"""
MongoDB Document Repository

Thin wrapper around a pymongo collection. The collection is handed in by
BoardStore, which owns the client; this class never opens connections.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.collection import Collection

from ..errors import store_operation
from .base import DocumentRepositoryInterface, WriteResult

logger = logging.getLogger(__name__)


class MongoDocumentRepository(DocumentRepositoryInterface):
    """
    Repository over one MongoDB collection.

    Error Handling:
    - Every PyMongoError is logged and re-raised as StoreError
    - No retries; the driver's own timeouts apply
    """

    def __init__(self, collection: Collection):
        self._collection = collection

    @property
    def collection_name(self) -> str:
        return self._collection.name

    @store_operation("insert_one")
    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        result = self._collection.insert_one(document)
        return WriteResult(inserted_id=str(result.inserted_id))

    @store_operation("insert_many")
    def insert_many(self, documents: List[Dict[str, Any]]) -> WriteResult:
        if not documents:
            return WriteResult()
        result = self._collection.insert_many(documents)
        return WriteResult(inserted_ids=[str(i) for i in result.inserted_ids])

    @store_operation("find")
    def find(
        self,
        filter: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        cursor = self._collection.find(filter)

        if sort:
            cursor = cursor.sort(sort)
        if limit > 0:
            cursor = cursor.limit(limit)

        return list(cursor)

    @store_operation("find_one_by_id")
    def find_one_by_id(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        return self._collection.find_one({"_id": object_id})

    @store_operation("delete_one_by_id")
    def delete_one_by_id(self, object_id: ObjectId) -> WriteResult:
        result = self._collection.delete_one({"_id": object_id})
        return WriteResult(deleted_count=result.deleted_count)

    @store_operation("delete_many")
    def delete_many(self, filter: Dict[str, Any]) -> WriteResult:
        result = self._collection.delete_many(filter)
        return WriteResult(deleted_count=result.deleted_count)

    @store_operation("ensure_indexes")
    def ensure_indexes(self, indexes: List[List[tuple]]) -> None:
        for keys in indexes:
            self._collection.create_index(keys)
        logger.info(f"Indexes ensured on {self.collection_name}: {len(indexes)}")
