"""
Error responses - maps domain exceptions to HTTP status codes and bodies.

Bodies only ever carry the exception's fixed message (or the validation
error list), never internal details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from account_auth.api.models import ErrorResponse, FieldErrorModel, ValidationErrorResponse
from account_auth.domain.exceptions import (
    AccountError,
    DuplicateAccount,
    InternalError,
    InvalidCredentials,
    InvalidEmailFormat,
    RateLimited,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Map exceptions to HTTP status codes
EXCEPTION_STATUS_MAP = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidEmailFormat: status.HTTP_400_BAD_REQUEST,
    DuplicateAccount: status.HTTP_400_BAD_REQUEST,
    InvalidCredentials: status.HTTP_400_BAD_REQUEST,
    RateLimited: status.HTTP_429_TOO_MANY_REQUESTS,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(exc: AccountError) -> JSONResponse:
    """Build the HTTP response for a domain exception."""
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(exc, ValidationError):
        body = ValidationErrorResponse(
            errors=[FieldErrorModel(field=e.field, message=e.message) for e in exc.errors]
        )
    else:
        body = ErrorResponse(message=exc.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report unparsable request bodies as 400 with an ``errors`` list.

    Covers payloads the lenient request models still cannot accept,
    such as non-string fields or a malformed ``dateOfBirth``.
    """
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(location) or "body", "message": error.get("msg", "Invalid value")})
    logger.info("Rejected unparsable request body for %s", request.url.path)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 for anything that escaped the domain services."""
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return error_response(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the request-parsing and last-resort error handlers to ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
