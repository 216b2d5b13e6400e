from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from uuid import uuid4

from rerank_proxy.application.rerank.schemas import ErrorResponse
from rerank_proxy.core.errors import (
    AppError,
    BadRequest,
    InternalError,
    InvalidJSON,
    NotFound,
    TEIError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[AppError], tuple[int, str]] = {
    BadRequest: (status.HTTP_400_BAD_REQUEST, "bad_request"),
    InvalidJSON: (status.HTTP_400_BAD_REQUEST, "invalid_json"),
    NotFound: (status.HTTP_404_NOT_FOUND, "not_found"),
    TEIError: (status.HTTP_502_BAD_GATEWAY, "tei_error"),
    InternalError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error"),
}

INTERNAL_SERVER_ERROR = (
    status.HTTP_500_INTERNAL_SERVER_ERROR,
    "internal_error",
    "Internal Server Error",
)


def map_error(exc: Exception) -> tuple[int, str, str]:
    """
    Map an error to (HTTP status, machine code, message).
    Anything outside the AppError taxonomy is an opaque internal error.
    """
    for error_type, (status_code, code) in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code, code, exc.message
    return INTERNAL_SERVER_ERROR


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=code, message=message).model_dump(),
    )


async def app_error_handler(request: Request, exc: AppError):
    return error_response(*map_error(exc))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return error_response(*map_error(InvalidJSON()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # No route for this method and path.
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return error_response(*map_error(NotFound()))

    logger.error(
        f"Unhandled HTTP error on {request.method} {request.url.path}: "
        f"{exc.status_code} {exc.detail}"
    )
    return error_response(*INTERNAL_SERVER_ERROR)


async def global_exception_handler(request: Request, exc: Exception):
    """
    Safety net for exceptions outside the AppError taxonomy.
    Does not leak exception details to the client.
    """
    error_id = uuid4()
    logger.error(f"Unhandled exception {error_id}: {exc}", exc_info=True)

    return error_response(*INTERNAL_SERVER_ERROR)
