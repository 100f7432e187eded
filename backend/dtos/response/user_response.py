"""
User Response DTOs

DTOs for user-related API responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """
    Response DTO for user information.

    Timestamps stay internal; clients see only the identifier and the
    editable fields.
    """

    id: int = Field(description="User ID")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address")
    age: int = Field(description="Age in years")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models


class ErrorResponse(BaseModel):
    """Uniform error envelope returned for every handled failure."""

    message: str = Field(description="Human-readable error message")
    timestamp: datetime = Field(description="When the error was produced")
