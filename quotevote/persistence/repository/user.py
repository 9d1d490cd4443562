"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert

from quotevote.domain.model import User
from quotevote.domain.repository.user import UserRepository
from quotevote.domain.value import Username
from quotevote.persistence.mappers import row_to_user, user_to_dict
from quotevote.persistence.repository.base import PostgresRepository
from quotevote.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        with logfire.span("user_repository.find_by_username", username=username.root):
            stmt = select(users_table).where(users_table.c.username == username.root)
            result = await self._execute("find user", stmt)
            row = result.fetchone()
            return row_to_user(row._asdict()) if row else None

    async def insert(self, user: User) -> Optional[User]:
        """Insert a user unless the username is taken."""
        with logfire.span("user_repository.insert", username=user.username.root):
            stmt = (
                insert(users_table)
                .values(**user_to_dict(user))
                .on_conflict_do_nothing(index_elements=[users_table.c.username])
                .returning(users_table.c.id)
            )
            result = await self._execute("insert user", stmt)
            if result.fetchone() is None:
                return None
            return user
