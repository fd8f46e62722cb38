"""
Application error types and their HTTP translation.

Services raise these instead of HTTPException so they stay usable outside a
request. The handlers registered by `register_exception_handlers` turn them
into `{"error": "..."}` JSON responses.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError, TimeoutError as PoolTimeoutError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class InvalidFile(ValidationError):
    message = "Invalid file"


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Could not validate credentials"


class InvalidCredentials(Unauthenticated):
    message = "Incorrect username or password"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Not allowed"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Data not found"


class StorageError(AppError):
    message = "Database error"


class StorageTimeout(StorageError):
    message = "Database timeout"


# Driver messages that indicate the per-call bound was hit
_TIMEOUT_MARKERS = (
    "statement timeout",
    "canceling statement",
    "timeout expired",
    "database is locked",
)


def classify_storage_error(exc: SQLAlchemyError) -> StorageError:
    """Map a SQLAlchemy failure onto StorageTimeout or StorageError."""
    if isinstance(exc, PoolTimeoutError):
        return StorageTimeout()
    if isinstance(exc, OperationalError):
        text = str(exc.orig if exc.orig is not None else exc).lower()
        if any(marker in text for marker in _TIMEOUT_MARKERS):
            return StorageTimeout()
    return StorageError()


def _error_response(exc: AppError) -> JSONResponse:
    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error_response(exc)


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    error = classify_storage_error(exc)
    logger.error(f"{request.method} {request.url.path} storage failure: {exc}")
    return _error_response(error)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": ValidationError.message, "details": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
