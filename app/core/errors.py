"""
Application error types and the centralized error handler.

Endpoints and the CRUD layer raise these errors and never catch them.
Every error reaching the app is turned into the same JSON shape:

    {"error": {"message": ..., "status": ...}}
"""

import logging
from typing import Any, List, Optional, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

Message = Union[str, List[str]]


class AppError(Exception):
    """Base error carrying an HTTP status code and a message (or list of messages)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Message, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: Message = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: Message = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: Message = "Forbidden"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: Message = "Not Found"):
        super().__init__(message)


def error_response(status_code: int, message: Any) -> JSONResponse:
    """Build the JSON error body shared by every error handler."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


def format_validation_errors(errors) -> List[str]:
    """
    Turn pydantic error dicts into readable messages, e.g.
    "salary: Input should be greater than or equal to 0".
    """
    messages = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code < 500:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = format_validation_errors(exc.errors())
    logger.info(f"{request.method} {request.url.path} -> 400: {messages}")
    return error_response(status.HTTP_400_BAD_REQUEST, messages)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the centralized error handlers on the app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
