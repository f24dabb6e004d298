"""
Domain Exceptions

Every error raised by the services derives from BookstoreError. Each class
carries the HTTP status code the gateway answers with and a default,
client-safe message. The exception handlers in bookstore.main turn them
into JSON responses of the form {"message": ...}.

Status mapping:
- ValidationError, DuplicateUserError, InvalidCredentialsError: 400
- MissingTokenError, InvalidTokenError: 401
- ForbiddenError: 403
- NotFoundError: 404
- UnexpectedError: 500
"""

from fastapi import status


class BookstoreError(Exception):
    """Base exception for all bookstore service errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BookstoreError):
    """Request input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class DuplicateUserError(BookstoreError):
    """A user with this email is already registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class InvalidCredentialsError(BookstoreError):
    """Email/password pair did not match. Never says which one was wrong."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid email or password"


class MissingTokenError(BookstoreError):
    """No bearer token accompanied a protected request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenError(BookstoreError):
    """Bearer token is malformed, mis-signed or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"
    headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(BookstoreError):
    """Caller is authenticated but does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(BookstoreError):
    """Requested resource does not exist (or a lookup came back empty)."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UnexpectedError(BookstoreError):
    """A lower-level primitive (e.g. password hashing) failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
