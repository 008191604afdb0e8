"""
Document store connection management for MongoDB.
Wraps a single long-lived async client and provides per-operation timeouts.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import pymongo
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from app.config import Settings
import logging

logger = logging.getLogger(__name__)

# Collection names
PROPERTIES = "properties"
LISTINGS = "listings"
INQUIRIES = "inquiries"
APPOINTMENTS = "appointments"
USERS = "users"


class StoreConnectionError(RuntimeError):
    """Raised when the document store cannot be reached on startup."""


class MongoStore:
    """
    Handle to the document store.
    The underlying client is safe for concurrent use, so one instance is shared by all requests.
    """

    def __init__(
        self,
        client: AsyncMongoClient,
        database_name: str,
        operation_timeout: float = 5.0,
        connect_timeout: float = 10.0,
    ):
        self.client = client
        self.database = client[database_name]
        self.timeout = operation_timeout
        self.connect_timeout = connect_timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        """Build a store from application settings without connecting yet."""
        client = AsyncMongoClient(
            settings.mongodb_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=int(settings.store_connect_timeout * 1000),
            connectTimeoutMS=int(settings.store_connect_timeout * 1000),
            appname="realestate_listing_api",
        )
        return cls(
            client,
            settings.mongodb_database,
            operation_timeout=settings.store_operation_timeout,
            connect_timeout=settings.store_connect_timeout,
        )

    def collection(self, name: str) -> AsyncCollection:
        return self.database[name]

    @contextmanager
    def operation_timeout(self, seconds: Optional[float] = None) -> Iterator[None]:
        """
        Bound every store call made inside the block by a single deadline.

        Args:
            seconds: Override for the configured operation timeout
        """
        with pymongo.timeout(seconds or self.timeout):
            yield

    async def connect(self) -> None:
        """
        Verify connectivity with a ping.

        Raises:
            StoreConnectionError: If the server cannot be reached within the connect timeout
        """
        try:
            with self.operation_timeout(self.connect_timeout):
                await self.database.command("ping")
        except PyMongoError as e:
            logger.error(f"Error pinging MongoDB: {e}")
            raise StoreConnectionError(f"Failed to connect to MongoDB: {e}") from e
        logger.info(f"Connected to MongoDB database '{self.database.name}'")

    async def ping(self) -> bool:
        """Return True if the store answers a ping within the operation timeout."""
        try:
            with self.operation_timeout():
                await self.database.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.close()
        logger.info("Database connections closed")
