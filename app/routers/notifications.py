from fastapi import APIRouter

from app.dependencies import NotificationDep
from app.schemas.notifications import (
    ContactMessageRequest,
    ContactRequest,
    EnquiryRequest,
    ReservationRequest,
)
from app.schemas.responses import NotificationResponse

router = APIRouter(tags=["notifications"])


@router.post("/send-enquiry", response_model=NotificationResponse)
async def send_enquiry(request: EnquiryRequest, service: NotificationDep) -> NotificationResponse:
    await service.send_enquiry(request)
    return NotificationResponse(success=True, message="Emails sent to admin and user successfully!")


@router.post("/send-mail", response_model=NotificationResponse)
async def send_mail(request: ContactRequest, service: NotificationDep) -> NotificationResponse:
    await service.send_contact(request)
    return NotificationResponse(success=True, message="Message sent successfully!")


@router.post("/send-contact-message", response_model=NotificationResponse)
async def send_contact_message(
    request: ContactMessageRequest, service: NotificationDep
) -> NotificationResponse:
    await service.send_contact_message(request)
    return NotificationResponse(success=True, message="Emails sent successfully!")


@router.post("/api/reservation", response_model=NotificationResponse)
async def reservation(request: ReservationRequest, service: NotificationDep) -> NotificationResponse:
    await service.send_reservation(request)
    return NotificationResponse(success=True, message="Emails sent successfully")
