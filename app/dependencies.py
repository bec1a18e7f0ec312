from typing import Annotated

from fastapi import Depends, Request

from app.services.hotels import HotelService
from app.services.notifications import NotificationService
from app.services.popup import PopupStore
from app.services.testimonials import TestimonialService


def get_hotel_service(request: Request) -> HotelService:
    return request.app.state.hotel_service


def get_testimonial_service(request: Request) -> TestimonialService:
    return request.app.state.testimonial_service


def get_popup_store(request: Request) -> PopupStore:
    return request.app.state.popup_store


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notification_service


HotelDep = Annotated[HotelService, Depends(get_hotel_service)]
TestimonialDep = Annotated[TestimonialService, Depends(get_testimonial_service)]
PopupDep = Annotated[PopupStore, Depends(get_popup_store)]
NotificationDep = Annotated[NotificationService, Depends(get_notification_service)]
