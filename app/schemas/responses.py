from __future__ import annotations

from pydantic import BaseModel

from app.schemas.hotel import Hotel
from app.schemas.testimonial import Testimonial


class MessageResponse(BaseModel):
    message: str


class HotelResponse(BaseModel):
    message: str
    hotel: Hotel


class HotelImagesResponse(BaseModel):
    message: str
    hotel: Hotel
    addedImages: list[str]


class TestimonialResponse(BaseModel):
    message: str
    testimonial: Testimonial


class PopupResponse(BaseModel):
    message: str
    active: bool
    imageUrl: str | None = None


class NotificationResponse(BaseModel):
    success: bool
    message: str
