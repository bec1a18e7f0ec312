from pydantic import BaseModel

# Counts arrive as numbers or strings depending on the form
Count = int | str | None


class MailMessage(BaseModel):
    sender: str
    to: str
    subject: str
    html: str
    reply_to: str | None = None


class EnquiryRequest(BaseModel):
    checkIn: str | None = None
    checkOut: str | None = None
    adults: Count = None
    children: Count = None
    email: str | None = None
    phone: str | None = None  # the booking widget posts the guest's email here


class ContactRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    message: str | None = None


class ContactMessageRequest(BaseModel):
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None


class ReservationRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    hotel: str | None = None
    checkIn: str | None = None
    checkOut: str | None = None
    nights: Count = None
    guests: Count = None
    adults: Count = None
