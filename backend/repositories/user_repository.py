"""
User repository for user-specific data access operations.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email address.

        Args:
            email: Exact email to match

        Returns:
            User instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.email == email).first()

    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether a user already uses this email.

        Args:
            email: Email to check
            exclude_id: Ignore the user with this id (the one being updated)

        Returns:
            True if taken, False otherwise
        """
        query = self.db.query(self.model.id).filter(self.model.email == email)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first() is not None
