"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    UNKNOWN_EMAIL = "UNKNOWN_EMAIL"
    INVALID_PASSWORD = "INVALID_PASSWORD"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REGISTRATION_FAILED = "REGISTRATION_FAILED"
    NAME_CHANGE_FAILED = "NAME_CHANGE_FAILED"

    # Conflict errors (409)
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class UnknownEmailError(AuthenticationError):
    """No account is registered under the given email."""

    def __init__(self) -> None:
        super().__init__(
            message="No account exists for this email",
            error_code=ErrorCode.UNKNOWN_EMAIL,
        )


class InvalidPasswordError(AuthenticationError):
    """The supplied password does not match the stored credential."""

    def __init__(self) -> None:
        super().__init__(
            message="Password does not match",
            error_code=ErrorCode.INVALID_PASSWORD,
        )


class EmailAlreadyExistsError(AppException):
    """Email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message="An account with this email already exists",
            status_code=409,
            details={"email": email},
        )


class RegistrationFailedError(AppException):
    """The registration transaction was rolled back."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.REGISTRATION_FAILED,
            message="Failed to create user",
            status_code=400,
        )


class NameChangeFailedError(AppException):
    """The name change transaction was rolled back."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NAME_CHANGE_FAILED,
            message="Failed to change user name",
            status_code=400,
        )


class ProfileNotFoundError(AppException):
    """User has no profile."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found for user: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )
