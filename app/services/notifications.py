import logging

from app.exceptions.custom import ValidationError
from app.mappers import email_builder
from app.schemas.notifications import (
    ContactMessageRequest,
    ContactRequest,
    EnquiryRequest,
    MailMessage,
    ReservationRequest,
)
from app.services.mail import SmtpMailGateway

logger = logging.getLogger(__name__)


def _missing(*values: str | None) -> bool:
    return any(v is None or v.strip() == "" for v in values)


def _one_line(subject: str) -> str:
    return " ".join(subject.splitlines())


class NotificationService:
    """Builds the admin and acknowledgment mails for each website form.

    Every trigger sends the admin copy first, then the acknowledgment. A
    failure on either aborts the call; nothing is retried.
    """

    def __init__(self, gateway: SmtpMailGateway, admin_email: str):
        self._gateway = gateway
        self._admin_email = admin_email

    async def send_enquiry(self, req: EnquiryRequest) -> None:
        if _missing(req.email) and _missing(req.phone):
            raise ValidationError("User email is required")
        recipient = req.email or (req.phone if req.phone and "@" in req.phone else None)

        messages = [
            self._to_admin("New Enquiry Received from Website",
                           email_builder.build_enquiry_admin_html(req), reply_to=recipient),
        ]
        if recipient:
            messages.append(self._to_user(
                recipient, "Thank You for Your Enquiry",
                email_builder.build_enquiry_user_html(req),
            ))
        await self._dispatch("enquiry", messages)

    async def send_contact(self, req: ContactRequest) -> None:
        if _missing(req.name, req.email, req.message):
            raise ValidationError("All fields are required")

        await self._dispatch("contact", [
            self._to_admin(f"New Message from {req.name}",
                           email_builder.build_contact_admin_html(req), reply_to=req.email),
            self._to_user(req.email, "Thank You for Contacting Us!",
                          email_builder.build_contact_user_html(req)),
        ])

    async def send_contact_message(self, req: ContactMessageRequest) -> None:
        if _missing(req.firstName, req.lastName, req.email, req.message):
            raise ValidationError("Please fill all required fields.")

        await self._dispatch("contact form", [
            self._to_admin(f"New Contact Message from {req.firstName} {req.lastName}",
                           email_builder.build_contact_message_admin_html(req),
                           reply_to=req.email),
            self._to_user(req.email, "Thank You for Contacting Us!",
                          email_builder.build_contact_message_user_html(req)),
        ])

    async def send_reservation(self, req: ReservationRequest) -> None:
        if _missing(req.name, req.email, req.hotel, req.checkIn, req.checkOut):
            raise ValidationError("Name, email, hotel and stay dates are required")

        await self._dispatch("reservation", [
            self._to_admin(f"New Reservation - {req.hotel}",
                           email_builder.build_reservation_admin_html(req), reply_to=req.email),
            self._to_user(req.email, f"Your Reservation at {req.hotel} is Confirmed",
                          email_builder.build_reservation_user_html(req)),
        ])

    def _to_admin(self, subject: str, html: str, reply_to: str | None = None) -> MailMessage:
        return MailMessage(
            sender=self._admin_email,
            to=self._admin_email,
            subject=_one_line(subject),
            html=html,
            reply_to=reply_to,
        )

    def _to_user(self, to: str, subject: str, html: str) -> MailMessage:
        return MailMessage(sender=self._admin_email, to=to, subject=_one_line(subject), html=html)

    async def _dispatch(self, trigger: str, messages: list[MailMessage]) -> None:
        for message in messages:
            await self._gateway.send(message)
        logger.info("Sent %d %s mail(s)", len(messages), trigger)
