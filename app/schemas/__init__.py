"""
Pydantic schemas for request/response validation.
"""

# Property schemas
from .property import PropertyCreate, PropertyCreatedResponse, ImageUploadResponse

# Listing schemas
from .listing import ListingCreate, ListingCreatedResponse

# Inquiry schemas
from .inquiry import InquiryCreate, InquiryCreatedResponse

# Appointment schemas
from .appointment import AppointmentCreate, AppointmentCreatedResponse

# User schemas
from .user import UserCreate, UserCreatedResponse, UserExistsResponse

__all__ = [
    "PropertyCreate",
    "PropertyCreatedResponse",
    "ImageUploadResponse",

    "ListingCreate",
    "ListingCreatedResponse",

    "InquiryCreate",
    "InquiryCreatedResponse",

    "AppointmentCreate",
    "AppointmentCreatedResponse",

    "UserCreate",
    "UserCreatedResponse",
    "UserExistsResponse",
]
