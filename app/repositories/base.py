"""
Base repository class with common document operations using async pymongo.
Provides the generic "fetch all of a record type" read and the single-document writes.
"""

from typing import Any, Dict, Generic, List, Mapping, Optional, Type

from bson import ObjectId
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError

from app.database import MongoStore
from app.models.base import RecordT
import logging

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The document store could not complete an operation."""


class RecordDecodeError(Exception):
    """A stored document does not match its record shape."""


class BaseRepository(Generic[RecordT]):
    """
    Base repository class providing common document operations.
    Every call runs inside the store's operation timeout.
    """

    collection_name: str = ""

    def __init__(self, model: Type[RecordT], store: MongoStore, collection_name: Optional[str] = None):
        """
        Initialize repository with record class and document store.

        Args:
            model: Record class used to decode documents
            store: Shared document store handle
            collection_name: Override for the class-level collection name
        """
        self.model = model
        self.store = store
        self.collection = store.collection(collection_name or self.collection_name)

    def _decode(self, document: Mapping[str, Any]) -> RecordT:
        try:
            return self.model.from_document(document)
        except PydanticValidationError as e:
            logger.error(
                f"Failed to decode {self.model.__name__} document {document.get('_id')}: {e}"
            )
            raise RecordDecodeError(str(e)) from e

    async def get_all(self) -> List[RecordT]:
        """
        Get every record in the collection, in store order.

        Returns:
            List of decoded records

        Raises:
            StoreError: If the query or cursor iteration fails
            RecordDecodeError: On the first document that does not decode
        """
        records: List[RecordT] = []
        try:
            with self.store.operation_timeout():
                cursor = self.collection.find({})
                try:
                    async for document in cursor:
                        records.append(self._decode(document))
                finally:
                    await cursor.close()
        except PyMongoError as e:
            logger.error(f"Failed to get {self.model.__name__} records: {e}")
            raise StoreError(str(e)) from e

        logger.debug(f"Retrieved {len(records)} {self.model.__name__} records")
        return records

    async def find_one(self, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Get the raw document matching the filter.

        Returns:
            Document if found, None otherwise
        """
        try:
            with self.store.operation_timeout():
                return await self.collection.find_one(filters)
        except PyMongoError as e:
            logger.error(f"Failed to find {self.model.__name__} by {filters}: {e}")
            raise StoreError(str(e)) from e

    async def exists(self, filters: Dict[str, Any]) -> bool:
        """
        Check if at least one document matches the filter.
        """
        document = await self.find_one(filters)
        exists = document is not None
        logger.debug(f"{self.model.__name__} matching {filters} exists: {exists}")
        return exists

    async def create(self, document: Dict[str, Any]) -> str:
        """
        Insert a new document.

        Args:
            document: Field values for the new document, without ``_id``

        Returns:
            String form of the store-assigned id
        """
        try:
            with self.store.operation_timeout():
                result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise StoreError(str(e)) from e

        inserted_id = str(result.inserted_id)
        logger.debug(f"Created {self.model.__name__} with id: {inserted_id}")
        return inserted_id

    async def push(self, id: ObjectId, field: str, value: Any) -> int:
        """
        Append a value to a list field of one document atomically.

        Returns:
            Number of documents matched by id (0 or 1)
        """
        try:
            with self.store.operation_timeout():
                result = await self.collection.update_one({"_id": id}, {"$push": {field: value}})
        except PyMongoError as e:
            logger.error(f"Failed to update {self.model.__name__} {id}: {e}")
            raise StoreError(str(e)) from e

        logger.debug(f"Pushed to {self.model.__name__}.{field} for id {id}: matched {result.matched_count}")
        return result.matched_count
