"""
Inquiry and appointment services.
References to users, properties and listings are stored as given and not resolved.
"""

from datetime import datetime, timezone
from typing import List

from app.database import MongoStore
from app.models.appointment import Appointment
from app.models.inquiry import Inquiry
from app.repositories.base import StoreError, RecordDecodeError
from app.repositories.inquiry import AppointmentRepository, InquiryRepository
from app.schemas.appointment import AppointmentCreate
from app.schemas.inquiry import InquiryCreate
from app.utils.exceptions import InternalServerError
import logging

logger = logging.getLogger(__name__)


class InquiryService:

    def __init__(self, store: MongoStore):
        self.inquiry_repo = InquiryRepository(store)

    async def list_inquiries(self) -> List[Inquiry]:
        try:
            return await self.inquiry_repo.get_all()
        except StoreError:
            raise InternalServerError("Failed to retrieve Inquiries")
        except RecordDecodeError:
            raise InternalServerError("Failed to decode retrieved Inquiries")

    async def create_inquiry(self, inquiry_data: InquiryCreate) -> str:
        document = inquiry_data.to_document()
        document["Created_at"] = datetime.now(timezone.utc)

        try:
            inquiry_id = await self.inquiry_repo.create(document)
        except StoreError:
            raise InternalServerError("Failed to create Inquiry")

        logger.info(f"Inquiry created by user {inquiry_data.user_id} (ID: {inquiry_id})")
        return inquiry_id


class AppointmentService:

    def __init__(self, store: MongoStore):
        self.appointment_repo = AppointmentRepository(store)

    async def list_appointments(self) -> List[Appointment]:
        try:
            return await self.appointment_repo.get_all()
        except StoreError:
            raise InternalServerError("Failed to retrieve Appointments")
        except RecordDecodeError:
            raise InternalServerError("Failed to decode retrieved Appointments")

    async def create_appointment(self, appointment_data: AppointmentCreate) -> str:
        document = appointment_data.to_document()
        document["Created_at"] = datetime.now(timezone.utc)

        try:
            appointment_id = await self.appointment_repo.create(document)
        except StoreError:
            raise InternalServerError("Failed to create Appointment")

        logger.info(f"Appointment created for listing {appointment_data.listing_id} (ID: {appointment_id})")
        return appointment_id
