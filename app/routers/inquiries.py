"""
Inquiry and appointment API endpoints.
"""

from fastapi import APIRouter, Depends
from typing import List

from app.models.appointment import Appointment
from app.models.inquiry import Inquiry
from app.schemas.appointment import AppointmentCreate, AppointmentCreatedResponse
from app.schemas.inquiry import InquiryCreate, InquiryCreatedResponse
from app.services.inquiry import AppointmentService, InquiryService
from app.utils.dependencies import get_appointment_service, get_inquiry_service


router = APIRouter(tags=["Inquiries"])


@router.get("/inquiries", response_model=List[Inquiry], summary="List all inquiries")
async def list_inquiries(
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> List[Inquiry]:
    return await inquiry_service.list_inquiries()


@router.post("/add/inquiry", response_model=InquiryCreatedResponse, summary="Create new inquiry")
async def create_inquiry(
    inquiry_data: InquiryCreate,
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> InquiryCreatedResponse:
    inquiry_id = await inquiry_service.create_inquiry(inquiry_data)
    return InquiryCreatedResponse(inquiry_id=inquiry_id)


@router.get(
    "/appointments",
    response_model=List[Appointment],
    tags=["Appointments"],
    summary="List all appointments",
)
async def list_appointments(
    appointment_service: AppointmentService = Depends(get_appointment_service)
) -> List[Appointment]:
    return await appointment_service.list_appointments()


@router.post(
    "/add/appointment",
    response_model=AppointmentCreatedResponse,
    tags=["Appointments"],
    summary="Create new appointment",
)
async def create_appointment(
    appointment_data: AppointmentCreate,
    appointment_service: AppointmentService = Depends(get_appointment_service)
) -> AppointmentCreatedResponse:
    appointment_id = await appointment_service.create_appointment(appointment_data)
    return AppointmentCreatedResponse(appointment_id=appointment_id)
