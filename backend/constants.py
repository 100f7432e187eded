"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
service so routes, services and tests agree on them.
"""
from enum import Enum


class UserEventType(str, Enum):
    """Lifecycle events published for a user."""

    USER_CREATED = 'USER_CREATED'
    USER_UPDATED = 'USER_UPDATED'
    USER_DELETED = 'USER_DELETED'


class UserConstraints:
    """Validation limits for user fields"""

    # Range of the integer primary key (signed 64-bit)
    ID_MIN = 1
    ID_MAX = 2**63 - 1

    NAME_MIN_LENGTH = 2
    NAME_MAX_LENGTH = 100
    NAME_PATTERN = r'[A-Za-z\s]+'

    EMAIL_MAX_LENGTH = 255
    EMAIL_PATTERN = r'[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}'

    AGE_MIN = 1
    AGE_MAX = 150


class ErrorMessages:
    """Client-facing error messages"""

    USER_NOT_FOUND = "User with this id was not found!"
    USERS_EMPTY = "No users found"
    EMAIL_TAKEN = "Email is already taken"

    NAME_HAS_DIGITS = "name must not contain digits"
    NAME_INVALID_CHARS = "name must contain only letters and spaces"
    NAME_BLANK = "name must not be blank"
    NAME_LENGTH = (
        f"name must be between {UserConstraints.NAME_MIN_LENGTH} "
        f"and {UserConstraints.NAME_MAX_LENGTH} characters"
    )
    EMAIL_INVALID = "email must be a valid email address"
    AGE_TOO_SMALL = "age must be greater than 0"
    AGE_TOO_LARGE = f"age must not be greater than {UserConstraints.AGE_MAX}"


class ServerConfig:
    """Service identity"""

    SERVICE_NAME = "User Service API"
    VERSION = "1.0.0"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
