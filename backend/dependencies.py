"""
Dependency injection providers for FastAPI.

Factory functions for the settings, publisher and service instances used
by the routes. Tests swap them through app.dependency_overrides.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from config.settings import Settings, settings
from database import get_db
from services.interfaces import IUserService
from services.notification_publisher import UserNotificationPublisher, publisher
from services.user_service import UserService


def get_settings() -> Settings:
    """Return the settings loaded at startup."""
    return settings


def get_notification_publisher() -> UserNotificationPublisher:
    """Return the process-wide notification publisher."""
    return publisher


def get_user_service(
    db: Session = Depends(get_db),
    notification_publisher: UserNotificationPublisher = Depends(get_notification_publisher),
    app_settings: Settings = Depends(get_settings),
) -> IUserService:
    """
    Factory function for creating UserService instances.

    Args:
        db: Database session (injected)
        notification_publisher: Publisher for lifecycle events (injected)
        app_settings: Service settings (injected)

    Returns:
        IUserService: User service implementation
    """
    return UserService(
        db,
        publisher=notification_publisher,
        empty_list_is_error=app_settings.empty_list_is_error,
    )
