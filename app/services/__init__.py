"""
Service layer for business logic implementation.
Contains services for properties, listings, inquiries, appointments, users, image hosting and error handling.
"""

from .property import PropertyService
from .listing import ListingService
from .inquiry import InquiryService, AppointmentService
from .user import UserService
from .image import ImageHost, CloudinaryImageHost
from .error_handler import ErrorHandlerService

__all__ = [
    "PropertyService",
    "ListingService",
    "InquiryService",
    "AppointmentService",
    "UserService",
    "ImageHost",
    "CloudinaryImageHost",
    "ErrorHandlerService"
]
