# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...core.exceptions import (
    ConflictError,
    HashError,
    NotFoundError,
    StoreError,
    StoreTimeoutError,
    UserStoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching class wins
_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (HashError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StoreTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: UserStoreError) -> int:
    """Map a user store error to an HTTP status code"""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def user_store_error_handler(request: Request, exc: UserStoreError) -> JSONResponse:
    """Serialize any user store error as {"error": message}"""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies in the same {"error": message} shape"""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid")
        problems.append(f"{location}: {message}" if location else message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(problems) or "invalid request"},
    )


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(UserStoreError, user_store_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
