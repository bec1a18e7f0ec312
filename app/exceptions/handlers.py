import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .custom import (
    DependencyFailureError,
    InvalidNameError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Routes whose clients expect a "success" flag on every response
NOTIFICATION_PATHS = frozenset({
    "/send-enquiry",
    "/send-mail",
    "/send-contact-message",
    "/api/reservation",
})


def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    content: dict = {"detail": message}
    if request.url.path in NOTIFICATION_PATHS:
        content = {"success": False, **content}
    return JSONResponse(status_code=status_code, content=content)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("Validation error on %s: %s", request.url.path, exc.message)
    return _error_response(request, 400, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    message = "Invalid request: " + "; ".join(problems) if problems else "Invalid request"
    logger.warning("Malformed request on %s: %s", request.url.path, message)
    return _error_response(request, 400, message)


async def invalid_name_error_handler(request: Request, exc: InvalidNameError) -> JSONResponse:
    logger.warning("Rejected hotel name %r on %s", exc.name, request.url.path)
    return _error_response(request, 400, exc.message)


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("%s not found (key=%s)", exc.entity, exc.key)
    return _error_response(request, 404, exc.message)


async def dependency_failure_handler(
    request: Request, exc: DependencyFailureError
) -> JSONResponse:
    logger.error("%s failure on %s: %s", exc.dependency, request.url.path, exc.message)
    message = "Failed to send email" if exc.dependency == "mail" else "Internal Server Error"
    return _error_response(request, 500, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
    return _error_response(request, 500, "Something went wrong!")
