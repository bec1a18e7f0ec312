from html import escape

from app.schemas.notifications import (
    ContactMessageRequest,
    ContactRequest,
    EnquiryRequest,
    ReservationRequest,
)

SIGNATURE = "<p>— Team Southend Group</p>"


def _plain(value: object) -> str:
    return "" if value is None else str(value)


def _text(value: object) -> str:
    return escape(_plain(value))


def _items(rows: list[tuple[str, object]]) -> str:
    lines = "".join(f"<li><b>{label}:</b> {_text(value)}</li>" for label, value in rows)
    return f"<ul>{lines}</ul>"


def _stay_rows(req: EnquiryRequest) -> list[tuple[str, object]]:
    return [
        ("Check-In", req.checkIn),
        ("Check-Out", req.checkOut),
        ("Adults", req.adults),
        ("Children", req.children),
    ]


def build_enquiry_admin_html(req: EnquiryRequest) -> str:
    rows = _stay_rows(req)
    if req.email:
        rows.append(("User Email", req.email))
    if req.phone:
        rows.append(("Phone", req.phone))
    return (
        "<h2>New Enquiry Received</h2>"
        "<p>Here are the details:</p>"
        f"{_items(rows)}"
        "<p>— This enquiry was submitted via your website form.</p>"
    )


def build_enquiry_user_html(req: EnquiryRequest) -> str:
    return (
        "<h2>Thank you for reaching out!</h2>"
        "<p>We’ve received your enquiry with the following details:</p>"
        f"{_items(_stay_rows(req))}"
        "<p>Our team will contact you shortly.</p>"
        f"<br>{SIGNATURE}"
    )


def build_contact_admin_html(req: ContactRequest) -> str:
    return (
        "<h2>New Contact Message</h2>"
        f"<p><b>Name:</b> {_text(req.name)}</p>"
        f"<p><b>Email:</b> {_text(req.email)}</p>"
        "<p><b>Message:</b></p>"
        f"<p>{_text(req.message)}</p>"
    )


def build_contact_user_html(req: ContactRequest) -> str:
    return (
        f"<h2>Hello {_text(req.name)},</h2>"
        "<p>Thank you for reaching out! We’ve received your message.</p>"
        "<p>Our team will contact you shortly.</p>"
        f"<br>{SIGNATURE}"
    )


def build_contact_message_admin_html(req: ContactMessageRequest) -> str:
    rows = [
        ("Name", f"{req.firstName} {req.lastName}"),
        ("Email", req.email),
        ("Phone", req.phone or "Not provided"),
    ]
    return (
        "<h2>New Contact Form Message</h2>"
        f"{_items(rows)}"
        "<p><b>Message:</b></p>"
        f"<p>{_text(req.message)}</p>"
        "<br><p>— Sent via Website Contact Form</p>"
    )


def build_contact_message_user_html(req: ContactMessageRequest) -> str:
    return (
        f"<h2>Hello {_text(req.firstName)},</h2>"
        "<p>Thank you for reaching out! We’ve received your message.</p>"
        "<p>Our team will contact you shortly.</p>"
        f"<br>{SIGNATURE}"
    )


def _booking_rows(req: ReservationRequest) -> list[tuple[str, object]]:
    return [
        ("Hotel", req.hotel),
        ("Check-In", req.checkIn),
        ("Check-Out", req.checkOut),
        ("Nights", req.nights),
        ("Guests", f"{_plain(req.guests)} (Adults: {_plain(req.adults)})"),
    ]


def build_reservation_admin_html(req: ReservationRequest) -> str:
    rows = [("Name", req.name), ("Email", req.email), ("Phone", req.phone), *_booking_rows(req)]
    return f"<h2>New Reservation Request</h2>{_items(rows)}"


def build_reservation_user_html(req: ReservationRequest) -> str:
    return (
        "<h2>Reservation Confirmed!</h2>"
        f"<p>Dear {_text(req.name)},</p>"
        "<p>Thank you for booking with us. Here are your details:</p>"
        f"{_items(_booking_rows(req))}"
        "<p>We look forward to welcoming you!</p>"
    )
