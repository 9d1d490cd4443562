"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quotevote.domain.model.user import User
from quotevote.domain.value import Username


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The username to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, user: User) -> Optional[User]:
        """Store a new user.

        Args:
            user: The user to store

        Returns:
            The stored user, or None if the username is already taken
        """
        pass
