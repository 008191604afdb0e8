"""
Record shapes for the Real Estate Listing API.
Includes Property, Listing, Inquiry, Appointment and User documents.
"""

from app.models.base import Record
from app.models.property import Property
from app.models.listing import Listing, ListingType, ListingStatus, FacingDirection
from app.models.inquiry import Inquiry
from app.models.appointment import Appointment, AppointmentStatus
from app.models.user import User, UserRole

# Export all models for easy importing
__all__ = [
    "Record",
    "Property",
    "Listing",
    "ListingType",
    "ListingStatus",
    "FacingDirection",
    "Inquiry",
    "Appointment",
    "AppointmentStatus",
    "User",
    "UserRole",
]
