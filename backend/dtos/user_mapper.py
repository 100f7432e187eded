"""
Conversions between the User entity and its DTOs.

Plain field-by-field copies; validation has already happened on the way in.
"""

from typing import Iterable, List

from constants import UserEventType
from dtos.internal.user_notification_dto import UserNotificationDto
from dtos.request.user_request import UserDto
from dtos.response.user_response import UserResponse
from models import User


def to_entity(dto: UserDto) -> User:
    """Build a transient User from a request DTO (no id, no timestamps)."""
    return User(name=dto.name, email=dto.email, age=dto.age)


def to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email, age=user.age)


def to_response_list(users: Iterable[User]) -> List[UserResponse]:
    return [to_response(user) for user in users]


def to_notification(user: User, event_type: UserEventType) -> UserNotificationDto:
    return UserNotificationDto(email=user.email, event_type=event_type)
