"""
Response DTOs

DTOs for outgoing API responses. These keep the database model (and its
timestamps) out of the public contract.
"""

from .user_response import ErrorResponse, UserResponse

__all__ = ["ErrorResponse", "UserResponse"]
