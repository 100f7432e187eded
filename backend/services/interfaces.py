"""
Service Interfaces

Abstract base classes for the service layer, so routes depend on a contract
and tests can substitute their own implementation.
"""

from abc import ABC, abstractmethod
from typing import List

from models import User


class IUserService(ABC):
    """
    Interface for user management operations.

    Implementations own the transaction: each mutating call commits on
    success and rolls back on failure.
    """

    @abstractmethod
    def find_all(self) -> List[User]:
        """
        Return every user.

        Raises:
            UserNotFoundError: If the store is empty and the service is
                configured to treat that as an error
        """
        pass

    @abstractmethod
    def find_one(self, user_id: int) -> User:
        """
        Return a single user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Persist a new user, stamping created_at and updated_at.

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        pass

    @abstractmethod
    def update(self, user_id: int, updated_user: User) -> User:
        """
        Overwrite name, email and age of an existing user.

        Raises:
            UserNotFoundError: If no user has this id
            DuplicateEmailError: If the new email belongs to another user
        """
        pass

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """
        Remove a user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        pass
