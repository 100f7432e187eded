"""
User Service

Business rules for users: email uniqueness, timestamping, not-found
signalling and lifecycle notifications. Routes stay thin and call into here.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from constants import ErrorMessages, UserEventType
from dtos.user_mapper import to_notification
from exceptions import DuplicateEmailError, UserNotFoundError
from models import User
from repositories.user_repository import UserRepository
from services.interfaces import IUserService
from services.notification_publisher import UserNotificationPublisher

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class UserService(IUserService):
    """Service for user-related business logic."""

    def __init__(
        self,
        db: Session,
        publisher: Optional[UserNotificationPublisher] = None,
        empty_list_is_error: bool = True,
        clock: Callable[[], datetime] = utcnow,
    ):
        """
        Initialize UserService.

        Args:
            db: Database session
            publisher: Receives lifecycle notifications after each commit;
                None disables publishing
            empty_list_is_error: Raise UserNotFoundError from find_all()
                when no users exist instead of returning []
            clock: Source of timestamps
        """
        self.db = db
        self.user_repo = UserRepository(db)
        self.publisher = publisher
        self.empty_list_is_error = empty_list_is_error
        self.clock = clock

    def find_all(self) -> List[User]:
        logger.info("Fetching all users")
        users = self.user_repo.get_all()

        if not users and self.empty_list_is_error:
            logger.error("User list is empty")
            raise UserNotFoundError(message=ErrorMessages.USERS_EMPTY)

        logger.info(f"Found {len(users)} user(s)")
        return users

    def find_one(self, user_id: int) -> User:
        logger.info(f"Looking up user {user_id}")
        user = self.user_repo.get_by_id(user_id)

        if user is None:
            logger.error(f"User {user_id} not found")
            raise UserNotFoundError(user_id)

        return user

    def save(self, user: User) -> User:
        logger.info(f"Saving user with email {user.email}")

        if self.user_repo.exists_by_email(user.email):
            logger.error(f"Email {user.email} is already taken")
            raise DuplicateEmailError(user.email)

        now = self.clock()
        user.created_at = now
        user.updated_at = now

        self._persist(user)
        logger.info(f"User {user.id} with email {user.email} saved")

        self._notify(user, UserEventType.USER_CREATED)
        return user

    def update(self, user_id: int, updated_user: User) -> User:
        logger.info(f"Updating user {user_id}")
        existing = self.user_repo.get_by_id(user_id)

        if existing is None:
            logger.error(f"User {user_id} not found for update")
            raise UserNotFoundError(user_id)

        if existing.email != updated_user.email and self.user_repo.exists_by_email(updated_user.email):
            logger.error(f"Email {updated_user.email} is already taken, cannot assign it to user {user_id}")
            raise DuplicateEmailError(updated_user.email)

        existing.name = updated_user.name
        existing.email = updated_user.email
        existing.age = updated_user.age
        existing.updated_at = self.clock()

        self._persist(existing)
        logger.info(f"User {user_id} updated")

        self._notify(existing, UserEventType.USER_UPDATED)
        return existing

    def delete(self, user_id: int) -> None:
        logger.info(f"Deleting user {user_id}")
        if not self.user_repo.exists(user_id):
            logger.error(f"User {user_id} not found for deletion")
            raise UserNotFoundError(user_id)

        removed = self.user_repo.delete_by_id(user_id)
        # Built before commit detaches the removed instance
        notification = to_notification(removed, UserEventType.USER_DELETED)

        self.db.commit()
        logger.info(f"User {user_id} deleted")

        if self.publisher is not None:
            self.publisher.publish(notification)

    def _persist(self, user: User) -> None:
        """
        Flush and commit. An IntegrityError caused by another user holding
        the same email (a writer that committed between the pre-check and
        this flush) becomes DuplicateEmailError; anything else propagates.
        """
        email = user.email
        user_id = user.id
        try:
            self.user_repo.save(user)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if self.user_repo.exists_by_email(email, exclude_id=user_id):
                logger.warning(f"Unique constraint rejected email {email}")
                raise DuplicateEmailError(email) from e
            raise

    def _notify(self, user: User, event_type: UserEventType) -> None:
        if self.publisher is None:
            return
        self.publisher.publish(to_notification(user, event_type))
