"""
Inquiry and appointment repositories.
"""

from app.database import MongoStore, INQUIRIES, APPOINTMENTS
from app.models.inquiry import Inquiry
from app.models.appointment import Appointment
from app.repositories.base import BaseRepository


class InquiryRepository(BaseRepository[Inquiry]):
    collection_name = INQUIRIES

    def __init__(self, store: MongoStore):
        super().__init__(Inquiry, store)


class AppointmentRepository(BaseRepository[Appointment]):
    collection_name = APPOINTMENTS

    def __init__(self, store: MongoStore):
        super().__init__(Appointment, store)
