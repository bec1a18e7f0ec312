import asyncio
import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorClient

from app.config import Settings
from app.exceptions.custom import (
    DependencyFailureError,
    InvalidNameError,
    NotFoundError,
    ValidationError,
)
from app.exceptions.handlers import (
    dependency_failure_handler,
    invalid_name_error_handler,
    not_found_error_handler,
    request_validation_error_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from app.mappers.hotel_merger import ALLOWED_HOTELS
from app.routers.hotels import router as hotels_router
from app.routers.notifications import router as notifications_router
from app.routers.popup import router as popup_router
from app.routers.testimonials import router as testimonials_router
from app.services.hotels import HotelService
from app.services.mail import SmtpMailGateway
from app.services.notifications import NotificationService
from app.services.popup import PopupStore
from app.services.testimonials import TestimonialService

logger = logging.getLogger(__name__)

settings = Settings()


def _log_async_fault(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    exc = context.get("exception")
    logger.error("Unhandled async fault: %s", context.get("message"), exc_info=exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    asyncio.get_running_loop().set_exception_handler(_log_async_fault)

    if not settings.mail_configured:
        logger.warning(
            "ADMIN_EMAIL or EMAIL_PASS not set. Email routes will fail until configured."
        )

    client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    db = client[settings.mongo_db]

    app.state.hotel_service = HotelService(
        db["hotels"],
        allowed_names=ALLOWED_HOTELS if settings.strict_name_allow_list else None,
        overwrite_description_on_empty=settings.overwrite_description_on_empty,
        with_location=settings.with_location,
    )
    app.state.testimonial_service = TestimonialService(
        db["testimonials"], default_avatar=settings.default_avatar
    )
    app.state.popup_store = PopupStore(settings.popup_file)

    gateway = SmtpMailGateway(
        settings.smtp_host,
        settings.smtp_port,
        settings.admin_email,
        settings.email_pass,
        timeout=settings.smtp_timeout,
    )
    app.state.notification_service = NotificationService(gateway, settings.admin_email)

    logger.info("Connected to MongoDB database %r", settings.mongo_db)
    try:
        yield
    finally:
        client.close()


app = FastAPI(title="Southend Hotels API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.add_exception_handler(ValidationError, validation_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(InvalidNameError, invalid_name_error_handler)
app.add_exception_handler(NotFoundError, not_found_error_handler)
app.add_exception_handler(DependencyFailureError, dependency_failure_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(hotels_router)
app.include_router(testimonials_router)
app.include_router(popup_router)
app.include_router(notifications_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
