"""
BaseRepository

Base class for all MongoDB repositories providing common CRUD operations.

Methods:
- create(document: Dict) -> str: Insert document, return ID
- get_document(id: str) -> Optional[Dict]: Find single document as stored (ObjectIds kept)
- find_by_id(id: str) -> Optional[Dict]: Find single document, JSON-ready
- update(id: str, updates: Dict) -> bool: $set fields, True if a document changed
- delete(id: str) -> bool: Delete document
- find_many(filter: Dict, limit: int, skip: int, sort: List) -> List[Dict]

Subclasses override collection_name and add specialized queries.

Every driver call runs inside store_errors(), so callers only ever see
StoreOperationError for store-side failures, including malformed ids.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

from bson import ObjectId
from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from eventhub.utils.errors import StoreOperationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_errors(operation: str) -> AsyncIterator[None]:
    """Translate driver exceptions raised inside the block into StoreOperationError."""
    # BSONError covers InvalidId and InvalidDocument; OverflowError is an int
    # wider than 8 bytes reaching the encoder
    try:
        yield
    except (PyMongoError, BSONError, OverflowError, TypeError, ValueError) as e:
        logger.exception(f"Store operation failed: {operation}")
        raise StoreOperationError() from e


def to_object_id(value: str) -> ObjectId:
    """Parse a 24-hex id. Raises InvalidId for anything else."""
    return ObjectId(value)


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Render ObjectIds as hex strings so the document is JSON-encodable."""
    return {key: _serialize_value(value) for key, value in document.items()}


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return serialize_document(value)
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    return value


class BaseRepository:
    """Common CRUD over one collection of schemaless documents."""

    collection_name: str = ""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.db[self.collection_name]

    async def create(self, document: Dict[str, Any]) -> str:
        async with store_errors(f"{self.collection_name}.insert_one"):
            # insert_one mutates its argument by adding _id
            result = await self.collection.insert_one(dict(document))
        return str(result.inserted_id)

    async def get_document(self, id: str) -> Optional[Dict[str, Any]]:
        async with store_errors(f"{self.collection_name}.find_one"):
            return await self.collection.find_one({"_id": to_object_id(id)})

    async def find_by_id(self, id: str) -> Optional[Dict[str, Any]]:
        document = await self.get_document(id)
        return serialize_document(document) if document is not None else None

    async def find_many(
        self,
        filter: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
        skip: int = 0,
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> List[Dict[str, Any]]:
        async with store_errors(f"{self.collection_name}.find"):
            cursor = self.collection.find(filter or {})
            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit is not None:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=None)
        return [serialize_document(d) for d in documents]

    async def update(self, id: str, updates: Dict[str, Any]) -> bool:
        async with store_errors(f"{self.collection_name}.update_one"):
            result = await self.collection.update_one(
                {"_id": to_object_id(id)},
                {"$set": updates},
            )
        if result.modified_count != 1:
            logger.info(
                f"{self.collection_name}.update_one on {id} changed nothing "
                f"(matched={result.matched_count})"
            )
        return result.modified_count == 1

    async def delete(self, id: str) -> bool:
        async with store_errors(f"{self.collection_name}.delete_one"):
            result = await self.collection.delete_one({"_id": to_object_id(id)})
        return result.deleted_count == 1
