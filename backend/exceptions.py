"""
Custom exception classes for the application.

This module defines domain-specific exceptions. Each one carries the HTTP
status code it is rendered with at the API boundary.
"""

from constants import ErrorMessages, HTTPStatus


class ApplicationError(Exception):
    """Base exception for all application errors"""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UserNotFoundError(ApplicationError):
    """Raised when a requested user does not exist"""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, user_id: int | None = None, message: str | None = None):
        details = {"user_id": user_id} if user_id is not None else {}
        super().__init__(message or ErrorMessages.USER_NOT_FOUND, details)


class DuplicateEmailError(ApplicationError):
    """Raised when an email is already used by another user"""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, email: str, message: str | None = None):
        super().__init__(message or ErrorMessages.EMAIL_TAKEN, {"email": email})


class ValidationError(ApplicationError):
    """Raised when request data violates the format rules"""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)
