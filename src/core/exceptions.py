"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any

GENERIC_FAILURE_MESSAGE = "Unable to process request - please try again"


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Lookup failures
    NOT_FOUND = "NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    REQUEST_NOT_PROCESSABLE = "REQUEST_NOT_PROCESSABLE"

    # Conflict errors
    EMAIL_TAKEN = "EMAIL_TAKEN"

    # Rate limiting
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception.

    Business failures are answered with a JSEND ``fail`` envelope, so the
    default HTTP status is 200 rather than a 4xx code.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 200,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundError(AppException):
    """A lookup by id, email or user id matched no row."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.NOT_FOUND,
    ) -> None:
        super().__init__(error_code=error_code, message=message)


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code=ErrorCode.USER_NOT_FOUND)


class ProfileNotFoundError(NotFoundError):
    """Profile not found."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code=ErrorCode.PROFILE_NOT_FOUND)


class RepositoryError(AppException):
    """The persistence layer rejected a write."""

    def __init__(self, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=message,
        )


class EmailTakenError(AppException):
    """Another user has already registered the email address."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_TAKEN,
            message="A user has already registered with this email address",
            details={"email": email},
        )


class PasswordMismatchError(AppException):
    """Supplied password does not verify against the stored hash."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.PASSWORD_MISMATCH,
            message="Password does not match the password on record - please try again",
        )


class RequestNotProcessableError(AppException):
    """Generic failure that hides whether the target record exists."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.REQUEST_NOT_PROCESSABLE,
            message=GENERIC_FAILURE_MESSAGE,
        )
