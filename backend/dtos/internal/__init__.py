"""
Internal DTOs

DTOs passed between services rather than over HTTP.
"""

from .user_notification_dto import UserNotificationDto

__all__ = ["UserNotificationDto"]
