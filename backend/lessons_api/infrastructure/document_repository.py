"""Mongo Document Repository — one collection, one driver call per operation.

Invariants:
    - Every PyMongoError is re-raised as DatabaseError carrying the collection name
    - No retries: a failed call fails the request
    - update_fields is a single-document $set, never a replace

Design Decisions:
    - Collection handle resolved lazily from the shared database per request;
      nothing is cached or validated against a schema
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from bson import ObjectId
from pymongo.errors import PyMongoError

from lessons_api.core.domain_types import Document, Filter, ID_FIELD, SortDirection
from lessons_api.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)


class MongoDocumentRepository:
    """DocumentRepository backed by a pymongo AsyncCollection."""

    def __init__(self, collection: Any, name: str):
        self._collection = collection
        self.name = name

    @asynccontextmanager
    async def _store_call(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except PyMongoError as e:
            logger.error(
                f"Store {operation} on '{self.name}' failed: {e}",
                extra={"collection": self.name},
            )
            raise DatabaseError(
                str(e), operation, ErrorContext(collection=self.name),
            )

    async def find(self, filter_: Filter | None = None) -> list[Document]:
        async with self._store_call("find"):
            cursor = self._collection.find(filter_ or {})
            return await cursor.to_list()

    async def find_sorted(
        self, limit: int, sort_field: str, direction: SortDirection,
    ) -> list[Document]:
        async with self._store_call("find"):
            cursor = self._collection.find(
                {}, limit=limit, sort=[(sort_field, direction.value)],
            )
            return await cursor.to_list()

    async def get_by_id(self, document_id: ObjectId) -> Document | None:
        async with self._store_call("find_one"):
            return await self._collection.find_one({ID_FIELD: document_id})

    async def insert(self, document: Document) -> Any:
        async with self._store_call("insert"):
            result = await self._collection.insert_one(document)
        logger.debug(
            f"Inserted {result.inserted_id} into '{self.name}'",
            extra={"collection": self.name},
        )
        return result.inserted_id

    async def update_fields(self, document_id: ObjectId, fields: Document) -> int:
        """Apply a field-level $set; returns the number of matched documents."""
        async with self._store_call("update"):
            result = await self._collection.update_one(
                {ID_FIELD: document_id}, {"$set": fields},
            )
        return result.matched_count

    async def delete(self, document_id: ObjectId) -> int:
        async with self._store_call("delete"):
            result = await self._collection.delete_one({ID_FIELD: document_id})
        return result.deleted_count
