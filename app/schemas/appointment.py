"""
Pydantic schemas for appointment requests and responses.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict

from app.models.appointment import AppointmentStatus


class AppointmentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    user_id: str = Field(..., min_length=1, alias="User_id")
    property_id: str = Field(..., min_length=1, alias="Property_id")
    listing_id: str = Field(..., min_length=1, alias="Listing_id")
    appointment_date: datetime = Field(..., alias="Appointment_date")
    status: AppointmentStatus = Field(AppointmentStatus.SCHEDULED, alias="Status")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class AppointmentCreatedResponse(BaseModel):
    appointment_id: str
