"""Application exception classes and handlers."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str, status_code: int = 400) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


# --- Validation (422) ---


class ValidationError(AppException):
    """A saved connection failed pre-persistence validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="VALIDATION_ERROR", status_code=422)


class InvalidConnectionUrlError(AppException):
    """A connection URL could not be parsed."""

    def __init__(self) -> None:
        super().__init__(
            message="Unable to parse connection string",
            code="INVALID_CONNECTION_URL",
            status_code=422,
        )


# --- Not Found (404) ---


class ConnectionNotFoundError(AppException):
    """Saved connection not found."""

    def __init__(self) -> None:
        super().__init__(
            message="Saved connection not found",
            code="CONNECTION_NOT_FOUND",
            status_code=404,
        )


# --- Encryption (500) ---


class EncryptionKeyError(AppException):
    """The encryption key is missing or malformed."""

    def __init__(self, message: str = "Encryption key is missing or invalid") -> None:
        super().__init__(message=message, code="ENCRYPTION_KEY_ERROR", status_code=500)


class DecryptionError(AppException):
    """A sealed value could not be decrypted with the configured key."""

    def __init__(self) -> None:
        super().__init__(
            message="Unable to decrypt stored secret",
            code="DECRYPTION_ERROR",
            status_code=500,
        )


# --- Exception Handlers ---


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Central exception handler for AppException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": exc.status_code,
            "message": exc.message,
            "code": exc.code,
        },
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request body validation failures in the error envelope."""
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(
        status_code=422,
        content={
            "status": 422,
            "message": message,
            "code": "REQUEST_VALIDATION_ERROR",
        },
    )
