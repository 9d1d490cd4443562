"""In-memory user repository for testing."""

from typing import Optional

from quotevote.domain.model import User
from quotevote.domain.repository.user import UserRepository
from quotevote.domain.value import Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        return self._users.get(username.root)

    async def insert(self, user: User) -> Optional[User]:
        """Insert a user unless the username is taken."""
        if user.username.root in self._users:
            return None
        self._users[user.username.root] = user
        return user
