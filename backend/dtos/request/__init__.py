"""
Request DTOs

DTOs for incoming API requests. Validation of client input happens here,
at the API boundary, before anything reaches the service layer.
"""

from .user_request import UserDto

__all__ = ["UserDto"]
