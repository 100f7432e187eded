"""
User Request DTOs

DTOs for user-related API requests.
"""

import re
from typing import List

from pydantic import BaseModel, Field, field_validator

from constants import ErrorMessages, UserConstraints

_NAME_RE = re.compile(UserConstraints.NAME_PATTERN)
_EMAIL_RE = re.compile(UserConstraints.EMAIL_PATTERN)


class UserDto(BaseModel):
    """
    Request DTO for creating or replacing a user.

    Carries only the client-editable fields; id and timestamps are owned
    by the service. A field with several violations reports all of them,
    joined with "; ".
    """

    name: str = Field(description="Display name, letters and spaces only")
    email: str = Field(description="Unique email address")
    age: int = Field(strict=True, description="Age in years, JSON integer only")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        problems: List[str] = []
        if not UserConstraints.NAME_MIN_LENGTH <= len(value) <= UserConstraints.NAME_MAX_LENGTH:
            problems.append(ErrorMessages.NAME_LENGTH)
        if any(ch.isdigit() for ch in value):
            problems.append(ErrorMessages.NAME_HAS_DIGITS)
        elif value and not _NAME_RE.fullmatch(value):
            problems.append(ErrorMessages.NAME_INVALID_CHARS)
        elif value and not value.strip():
            problems.append(ErrorMessages.NAME_BLANK)
        if problems:
            raise ValueError("; ".join(problems))
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if len(value) > UserConstraints.EMAIL_MAX_LENGTH or not _EMAIL_RE.fullmatch(value):
            raise ValueError(ErrorMessages.EMAIL_INVALID)
        return value

    @field_validator("age")
    @classmethod
    def validate_age(cls, value: int) -> int:
        if value < UserConstraints.AGE_MIN:
            raise ValueError(ErrorMessages.AGE_TOO_SMALL)
        if value > UserConstraints.AGE_MAX:
            raise ValueError(ErrorMessages.AGE_TOO_LARGE)
        return value

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "age": 30
            }
        }
