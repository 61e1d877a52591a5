"""Application error taxonomy and the handlers that render it as JSON."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.logger import logger


class AppError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(AppError):
    message = "Invalid request data"


class InvalidPassengerCount(ValidationError):
    message = "At least one passenger is required"


class InvalidClass(ValidationError):
    message = "Travel class is not available on this train"


class SeatSelectionError(ValidationError):
    message = "Invalid seat selection"


class DuplicateEmail(AppError):
    message = "Email already in use"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class AuthenticationRequired(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class InvalidOrExpiredToken(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid or expired token"


class AccessDenied(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Access denied"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class TrainNotFound(NotFound):
    message = "Train not found"


class TicketNotFound(NotFound):
    message = "Ticket not found"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.exception(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationError.message
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else first.get("msg", ValidationError.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": InternalError.message},
    )


EXCEPTION_HANDLERS = {
    AppError: app_error_handler,
    RequestValidationError: request_validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: unhandled_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
