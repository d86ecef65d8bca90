"""
Maps the domain error taxonomy to HTTP responses.

Every error body has the same shape as FastAPI's HTTPException:
``{"detail": "<message>"}``.
"""

# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DevConnectError,
    NotFoundError,
    StoreError,
    ValidationError,
    get_user_message,
)

logger = logging.getLogger(__name__)


STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exception: DevConnectError) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exception, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def first_validation_message(exception: RequestValidationError) -> str:
    """Surface only the first violation, prefixed with the offending field"""
    errors = exception.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = first.get("msg", "Invalid value")
    return f"{'.'.join(location)}: {message}" if location else message


async def handle_domain_error(request: Request, exception: DevConnectError) -> JSONResponse:
    status_code = status_for(exception)
    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exception.message}",
            exc_info=exception,
        )
    else:
        logger.debug(f"{request.method} {request.url.path} -> {status_code}: {exception.message}")
    return JSONResponse(status_code=status_code, content={"detail": get_user_message(exception)})


async def handle_request_validation_error(request: Request, exception: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": first_validation_message(exception)},
    )


async def handle_unexpected_error(request: Request, exception: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exception}", exc_info=exception)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": get_user_message(exception)},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(DevConnectError, handle_domain_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(Exception, handle_unexpected_error)
