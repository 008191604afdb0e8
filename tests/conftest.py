"""
Test configuration and fixtures for the real estate listing API.
Provides an in-memory document store, a stub image host, test clients and data factories.
"""

import os

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("ENVIRONMENT", "testing")

import copy
import io
from collections import defaultdict
from contextlib import nullcontext
from types import SimpleNamespace
from typing import Any, BinaryIO, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from PIL import Image
from pymongo.errors import PyMongoError

from app.main import app
from app.repositories.inquiry import AppointmentRepository, InquiryRepository
from app.repositories.listing import ListingRepository
from app.repositories.property import PropertyRepository
from app.repositories.user import UserRepository
from app.services.image import ImageHost
from app.services.inquiry import AppointmentService, InquiryService
from app.services.listing import ListingService
from app.services.property import PropertyService
from app.services.user import UserService
from app.utils.exceptions import ImageHostingError


# In-memory document store
class FakeCursor:
    """Async iterator over a snapshot of matching documents."""

    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents
        self.closed = False

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for document in self._documents:
            yield document

    async def close(self):
        self.closed = True


class FakeCollection:
    """
    The subset of the async pymongo collection API used by the repositories.
    Set ``error`` to make every operation raise it.
    """

    def __init__(self):
        self.documents: List[Dict[str, Any]] = []
        self.error: Optional[PyMongoError] = None

    def _check(self):
        if self.error is not None:
            raise self.error

    def _matches(self, document: Dict[str, Any], filters: Dict[str, Any]) -> bool:
        return all(key in document and document[key] == value for key, value in filters.items())

    def find(self, filters: Dict[str, Any]) -> FakeCursor:
        self._check()
        return FakeCursor([copy.deepcopy(d) for d in self.documents if self._matches(d, filters)])

    async def find_one(self, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._check()
        for document in self.documents:
            if self._matches(document, filters):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document: Dict[str, Any]):
        self._check()
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"], acknowledged=True)

    async def update_one(self, filters: Dict[str, Any], update: Dict[str, Any]):
        self._check()
        for document in self.documents:
            if self._matches(document, filters):
                for field, value in update.get("$push", {}).items():
                    document.setdefault(field, []).append(value)
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)


class FakeStore:
    """Stands in for MongoStore; collections are created on first use."""

    def __init__(self):
        self.collections: Dict[str, FakeCollection] = defaultdict(FakeCollection)
        self.healthy = True

    def collection(self, name: str) -> FakeCollection:
        return self.collections[name]

    def operation_timeout(self, seconds: Optional[float] = None):
        return nullcontext()

    async def ping(self) -> bool:
        return self.healthy


class StubImageHost(ImageHost):
    """Image host that records uploads and returns a fixed URL."""

    def __init__(self, url: str = "https://res.cloudinary.com/demo/image/upload/v1/sample.jpg"):
        self.url = url
        self.error: Optional[str] = None
        self.uploads: List[bytes] = []

    async def upload(self, file: BinaryIO, filename: Optional[str] = None) -> str:
        if self.error:
            raise ImageHostingError(f"Failed to upload image: {self.error}")
        self.uploads.append(file.read())
        return self.url


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def image_host() -> StubImageHost:
    return StubImageHost()


@pytest.fixture
def client(store: FakeStore, image_host: StubImageHost) -> TestClient:
    """Create a test client wired to the in-memory store and stub image host."""
    app.state.store = store
    app.state.image_host = image_host
    client = TestClient(app)
    yield client
    del app.state.store
    del app.state.image_host


# Repository fixtures
@pytest.fixture
def property_repository(store: FakeStore) -> PropertyRepository:
    return PropertyRepository(store)


@pytest.fixture
def listing_repository(store: FakeStore) -> ListingRepository:
    return ListingRepository(store)


@pytest.fixture
def inquiry_repository(store: FakeStore) -> InquiryRepository:
    return InquiryRepository(store)


@pytest.fixture
def appointment_repository(store: FakeStore) -> AppointmentRepository:
    return AppointmentRepository(store)


@pytest.fixture
def user_repository(store: FakeStore) -> UserRepository:
    return UserRepository(store)


# Service fixtures
@pytest.fixture
def property_service(store: FakeStore, image_host: StubImageHost) -> PropertyService:
    return PropertyService(store, image_host=image_host)


@pytest.fixture
def listing_service(store: FakeStore) -> ListingService:
    return ListingService(store)


@pytest.fixture
def inquiry_service(store: FakeStore) -> InquiryService:
    return InquiryService(store)


@pytest.fixture
def appointment_service(store: FakeStore) -> AppointmentService:
    return AppointmentService(store)


@pytest.fixture
def user_service(store: FakeStore) -> UserService:
    return UserService(store)


# Test data factories
class PropertyFactory:
    """Factory for property payloads."""

    @staticmethod
    def create_property_data(
        title: str = "Skyview",
        developer: str = "Acme",
        min_price: int = 100000,
        max_price: int = 200000,
        **overrides: Any
    ) -> dict:
        data = {
            "Title": title,
            "Developer": developer,
            "Description": "Twin towers overlooking the marina",
            "Coordinates": [25.0805, 55.1403],
            "MinPrice": min_price,
            "MaxPrice": max_price,
            "Facilities": ["Pool", "Gym"],
            "Built": 2021,
        }
        data.update(overrides)
        return data


class ListingFactory:
    """Factory for listing payloads."""

    @staticmethod
    def create_listing_data(property_id: str, **overrides: Any) -> dict:
        data = {
            "property_id": property_id,
            "description": "Two bedroom corner unit",
            "price": 1850000.0,
            "minimum_contract": "12 months",
            "floor": 14,
            "size": 112.5,
            "bedroom": 2,
            "bathroom": 2,
            "furniture": "fully furnished",
            "status": "ready to move in",
            "listing_type": "sale",
            "facing_direction": "NE",
            "listing_status": "active",
        }
        data.update(overrides)
        return data


class UserFactory:
    """Factory for user payloads."""

    @staticmethod
    def create_user_data(email: str = "jane@example.com", **overrides: Any) -> dict:
        data = {
            "name": "Jane Doe",
            "email": email,
            "phone": "+971500000000",
        }
        data.update(overrides)
        return data


def create_test_image(width: int = 64, height: int = 48, format: str = "JPEG") -> bytes:
    """Create a test image in memory."""
    img = Image.new("RGB", (width, height), color="red")
    img_bytes = io.BytesIO()
    img.save(img_bytes, format=format)
    return img_bytes.getvalue()
