# buildmate/core/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that are rendered to the client as {"message": ...}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or the body is malformed."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request body"


class AuthError(AppError):
    # 400 for bad credentials at login, 401 for token failures
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already exists"


class InternalError(AppError):
    """Any unexpected failure. The client only ever sees the generic message."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed body for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": ValidationError.message},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": InternalError.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error taxonomy to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
