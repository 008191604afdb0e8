"""
Tests for service classes.
Covers the write pipelines, referential validation, the user existence check and image attachment.
"""

import io
from datetime import datetime, timezone

import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect
from starlette.datastructures import Headers, UploadFile

from app.database import APPOINTMENTS, INQUIRIES, LISTINGS, PROPERTIES, USERS
from app.schemas.appointment import AppointmentCreate
from app.schemas.inquiry import InquiryCreate
from app.schemas.listing import ListingCreate
from app.schemas.property import PropertyCreate
from app.schemas.user import UserCreate
from app.services.listing import ListingService
from app.services.property import PropertyService
from app.services.user import UserService
from app.utils.exceptions import (
    BadRequestError,
    FileSizeExceededError,
    FileUploadError,
    ImageHostingError,
    InternalServerError,
    InvalidIdentifierError,
    PropertyNotFoundError,
    ReferencedRecordNotFoundError,
    UnsupportedFileTypeError,
)
from app.utils.passwords import verify_password
from tests.conftest import ListingFactory, PropertyFactory, UserFactory, create_test_image


def make_upload(data: bytes, content_type: str = "image/jpeg", filename: str = "photo.jpg") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        size=len(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


async def create_property(property_service: PropertyService, **overrides) -> str:
    data = PropertyCreate.model_validate(PropertyFactory.create_property_data(**overrides))
    return await property_service.create_property(data)


class TestPropertyService:

    async def test_create_property_initializes_images_and_timestamp(self, property_service: PropertyService, store):
        before = datetime.now(timezone.utc)

        property_id = await create_property(property_service)

        stored = store.collection(PROPERTIES).documents[0]
        assert str(stored["_id"]) == property_id
        assert stored["Images"] == []
        assert stored["Created_at"] >= before
        assert stored["Title"] == "Skyview"
        assert stored["MinPrice"] == 100000

    async def test_create_property_ignores_caller_images_and_timestamp(self, property_service: PropertyService, store):
        payload = PropertyFactory.create_property_data(
            Images=["https://evil.example/x.jpg"],
            Created_at="1999-01-01T00:00:00Z",
            property_id="665f1c2b9d1e8a3f4c2b1a09",
        )
        await property_service.create_property(PropertyCreate.model_validate(payload))

        stored = store.collection(PROPERTIES).documents[0]
        assert stored["Images"] == []
        assert stored["Created_at"].year != 1999
        assert stored["_id"] != ObjectId("665f1c2b9d1e8a3f4c2b1a09")

    async def test_list_properties(self, property_service: PropertyService):
        await create_property(property_service, title="One")
        await create_property(property_service, title="Two")

        properties = await property_service.list_properties()

        assert [p.title for p in properties] == ["One", "Two"]

    async def test_list_properties_store_failure(self, property_service: PropertyService, store):
        store.collection(PROPERTIES).error = AutoReconnect("connection reset")

        with pytest.raises(InternalServerError, match="Failed to retrieve Properties"):
            await property_service.list_properties()

    async def test_list_properties_decode_failure(self, property_service: PropertyService, store):
        store.collection(PROPERTIES).documents.append({"_id": ObjectId(), "MinPrice": "cheap"})

        with pytest.raises(InternalServerError, match="Failed to decode retrieved Properties"):
            await property_service.list_properties()

    async def test_create_property_store_failure(self, property_service: PropertyService, store):
        store.collection(PROPERTIES).error = AutoReconnect("connection reset")

        with pytest.raises(InternalServerError, match="Failed to create Property"):
            await create_property(property_service)


class TestImageAttachment:

    async def test_attach_image_appends_url(self, property_service: PropertyService, image_host, store):
        property_id = await create_property(property_service)
        image = create_test_image()

        first = await property_service.attach_image(property_id, make_upload(image))
        second = await property_service.attach_image(property_id, make_upload(image))

        assert first == second == image_host.url
        assert store.collection(PROPERTIES).documents[0]["Images"] == [image_host.url, image_host.url]
        assert image_host.uploads == [image, image]

    async def test_attach_image_invalid_id(self, property_service: PropertyService):
        with pytest.raises(InvalidIdentifierError, match="Invalid PropertyID format"):
            await property_service.attach_image("not-an-id", make_upload(create_test_image()))

    async def test_attach_image_unknown_property(self, property_service: PropertyService, image_host):
        with pytest.raises(PropertyNotFoundError):
            await property_service.attach_image(str(ObjectId()), make_upload(create_test_image()))
        assert image_host.uploads == []

    async def test_attach_image_too_large(self, store, image_host):
        service = PropertyService(store, image_host=image_host, max_upload_size=1024)
        property_id = await create_property(service)

        with pytest.raises(FileSizeExceededError):
            await service.attach_image(property_id, make_upload(b"\xff" * 2048))

    async def test_attach_image_rejects_non_image_content_type(self, property_service: PropertyService):
        property_id = await create_property(property_service)

        with pytest.raises(UnsupportedFileTypeError):
            await property_service.attach_image(property_id, make_upload(b"hello", content_type="text/plain"))

    async def test_attach_image_rejects_undecodable_image(self, property_service: PropertyService):
        property_id = await create_property(property_service)

        with pytest.raises(FileUploadError, match="Invalid image file"):
            await property_service.attach_image(property_id, make_upload(b"not really a jpeg"))

    async def test_attach_image_host_failure(self, property_service: PropertyService, image_host, store):
        property_id = await create_property(property_service)
        image_host.error = "quota exceeded"

        with pytest.raises(ImageHostingError, match="quota exceeded"):
            await property_service.attach_image(property_id, make_upload(create_test_image()))
        assert store.collection(PROPERTIES).documents[0]["Images"] == []

    async def test_attach_image_empty_url(self, property_service: PropertyService, image_host, store):
        property_id = await create_property(property_service)
        image_host.url = ""

        with pytest.raises(ImageHostingError, match="Empty secure URL"):
            await property_service.attach_image(property_id, make_upload(create_test_image()))
        assert store.collection(PROPERTIES).documents[0]["Images"] == []


class TestListingService:

    async def test_create_listing_for_existing_property(self, listing_service: ListingService,
                                                        property_service: PropertyService, store):
        property_id = await create_property(property_service)
        data = ListingCreate.model_validate(ListingFactory.create_listing_data(property_id))

        listing_id = await listing_service.create_listing(data)

        listings = store.collection(LISTINGS).documents
        assert len(listings) == 1
        assert str(listings[0]["_id"]) == listing_id
        assert listings[0]["photos"] == []
        assert listings[0]["property_id"] == property_id
        assert listings[0]["listing_type"] == "sale"
        assert isinstance(listings[0]["created_at"], datetime)

    async def test_create_listing_unknown_property(self, listing_service: ListingService, store):
        data = ListingCreate.model_validate(ListingFactory.create_listing_data(str(ObjectId())))

        with pytest.raises(ReferencedRecordNotFoundError) as exc_info:
            await listing_service.create_listing(data)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "PropertyID does not exist"
        assert store.collection(LISTINGS).documents == []

    async def test_create_listing_malformed_property_id(self, listing_service: ListingService, store):
        data = ListingCreate.model_validate(ListingFactory.create_listing_data("12345"))

        with pytest.raises(InvalidIdentifierError) as exc_info:
            await listing_service.create_listing(data)

        assert exc_info.value.detail == "Invalid PropertyID format"
        assert store.collection(LISTINGS).documents == []

    async def test_create_listing_lookup_failure(self, listing_service: ListingService, store):
        store.collection(PROPERTIES).error = AutoReconnect("connection reset")
        data = ListingCreate.model_validate(ListingFactory.create_listing_data(str(ObjectId())))

        with pytest.raises(InternalServerError, match="Failed to check PropertyID"):
            await listing_service.create_listing(data)
        assert store.collection(LISTINGS).documents == []


class TestInquiryAndAppointmentServices:

    async def test_create_inquiry_stamps_timestamp(self, inquiry_service, store):
        data = InquiryCreate(user_id="u1", property_id="p1", message="Is parking included?")

        inquiry_id = await inquiry_service.create_inquiry(data)

        stored = store.collection(INQUIRIES).documents[0]
        assert str(stored["_id"]) == inquiry_id
        assert isinstance(stored["Created_at"], datetime)
        assert (await inquiry_service.list_inquiries())[0].message == "Is parking included?"

    async def test_create_appointment_defaults_to_scheduled(self, appointment_service, store):
        data = AppointmentCreate.model_validate({
            "User_id": "u1",
            "Property_id": "p1",
            "Listing_id": "l1",
            "Appointment_date": "2026-11-02T10:00:00Z",
        })

        await appointment_service.create_appointment(data)

        stored = store.collection(APPOINTMENTS).documents[0]
        assert stored["Status"] == "scheduled"
        assert stored["Listing_id"] == "l1"
        appointments = await appointment_service.list_appointments()
        assert appointments[0].status == "scheduled"


class TestUserService:

    async def test_create_user_hashes_password(self, user_service: UserService, store):
        data = UserCreate.model_validate(UserFactory.create_user_data(password="s3cret-pass"))

        await user_service.create_user(data)

        stored = store.collection(USERS).documents[0]
        assert "password" not in stored
        assert verify_password("s3cret-pass", stored["password_hash"])
        assert stored["role"] == "user"

    async def test_create_user_does_not_enforce_unique_email(self, user_service: UserService, store):
        data = UserCreate.model_validate(UserFactory.create_user_data())

        await user_service.create_user(data)
        await user_service.create_user(data)

        assert len(store.collection(USERS).documents) == 2

    async def test_user_exists(self, user_service: UserService):
        await user_service.create_user(UserCreate.model_validate(UserFactory.create_user_data()))

        assert await user_service.user_exists("jane@example.com") is True
        assert await user_service.user_exists("none@x.com") is False

    async def test_user_exists_is_idempotent(self, user_service: UserService):
        first = await user_service.user_exists("none@x.com")
        second = await user_service.user_exists("none@x.com")

        assert first == second is False

    async def test_user_exists_requires_email(self, user_service: UserService):
        with pytest.raises(BadRequestError, match="Email query parameter is required"):
            await user_service.user_exists("")

    async def test_user_exists_lookup_failure(self, user_service: UserService, store):
        store.collection(USERS).error = AutoReconnect("connection reset")

        with pytest.raises(InternalServerError, match="Error checking user existence"):
            await user_service.user_exists("jane@example.com")
