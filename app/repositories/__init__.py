"""
Repository layer for data access operations.
Provides document store operations with per-call timeouts and error translation.
"""

from app.repositories.base import BaseRepository, StoreError, RecordDecodeError
from app.repositories.property import PropertyRepository
from app.repositories.listing import ListingRepository
from app.repositories.inquiry import InquiryRepository, AppointmentRepository
from app.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "StoreError",
    "RecordDecodeError",
    "PropertyRepository",
    "ListingRepository",
    "InquiryRepository",
    "AppointmentRepository",
    "UserRepository",
]
