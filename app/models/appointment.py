"""
Appointment record: a scheduled viewing of a listing.
"""

import enum
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.base import Record


class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Appointment(Record):
    id: Optional[str] = Field(None, alias="appointment_id")
    user_id: str = Field("", alias="User_id")
    property_id: str = Field("", alias="Property_id")
    listing_id: str = Field("", alias="Listing_id")
    appointment_date: Optional[datetime] = Field(None, alias="Appointment_date")
    status: str = Field("", alias="Status")
    created_at: Optional[datetime] = Field(None, alias="Created_at")
