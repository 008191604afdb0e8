"""
FastAPI dependency injection utilities.
Hands the shared document store and image host, created at startup, to request handlers.
"""

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.database import MongoStore
from app.services.image import ImageHost
from app.services.inquiry import AppointmentService, InquiryService
from app.services.listing import ListingService
from app.services.property import PropertyService
from app.services.user import UserService
from app.utils.exceptions import ServiceUnavailableError


def get_store(request: Request) -> MongoStore:
    """
    Get the document store opened during application startup.

    Raises:
        ServiceUnavailableError: If the application was started without a store
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise ServiceUnavailableError("Document store is not initialized")
    return store


def get_image_host(request: Request) -> ImageHost:
    image_host = getattr(request.app.state, "image_host", None)
    if image_host is None:
        raise ServiceUnavailableError("Image host is not initialized")
    return image_host


async def get_property_service(
    store: MongoStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
) -> PropertyService:
    return PropertyService(store, max_upload_size=settings.max_upload_size)


async def get_property_image_service(
    store: MongoStore = Depends(get_store),
    image_host: ImageHost = Depends(get_image_host),
    settings: Settings = Depends(get_settings)
) -> PropertyService:
    """
    Get a property service wired to the image host, for image attachment.
    """
    return PropertyService(store, image_host=image_host, max_upload_size=settings.max_upload_size)


async def get_listing_service(store: MongoStore = Depends(get_store)) -> ListingService:
    return ListingService(store)


async def get_inquiry_service(store: MongoStore = Depends(get_store)) -> InquiryService:
    return InquiryService(store)


async def get_appointment_service(store: MongoStore = Depends(get_store)) -> AppointmentService:
    return AppointmentService(store)


async def get_user_service(store: MongoStore = Depends(get_store)) -> UserService:
    return UserService(store)
