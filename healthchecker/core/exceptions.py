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


# --- Not Found (404) ---


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self) -> None:
        super().__init__(
            message="User not found",
            code="USER_NOT_FOUND",
            status_code=404,
        )


class HealthReportNotFoundError(AppException):
    """Health report not found."""

    def __init__(self) -> None:
        super().__init__(
            message="Health report not found",
            code="HEALTH_REPORT_NOT_FOUND",
            status_code=404,
        )


# --- Conflict (409) ---


class UserAlreadyExistsError(AppException):
    """User with this email already exists."""

    def __init__(self) -> None:
        super().__init__(
            message="User with this email already exists",
            code="USER_ALREADY_EXISTS",
            status_code=409,
        )


# --- Server errors (500) ---


class AIGatewayError(AppException):
    """The generative AI endpoint returned an error."""

    def __init__(
        self, message: str = "AI service failed to generate a response"
    ) -> None:
        super().__init__(message=message, code="AI_GATEWAY_ERROR", status_code=500)


class PersistenceError(AppException):
    """A database read or write failed."""

    def __init__(self, message: str = "Database operation failed") -> None:
        super().__init__(message=message, code="DATABASE_ERROR", status_code=500)


# --- Exception Handlers ---


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Central exception handler for AppException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 instead of FastAPI's 422."""
    details = "; ".join(
        ".".join(str(part) for part in error.get("loc", ()))
        + f": {error.get('msg', '')}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content={
            "error": f"Invalid request payload: {details}",
            "code": "INVALID_REQUEST",
        },
    )
