"""Authentication domain service.

Registration and password login. Tokens issued here are the bearer
credentials every quote route verifies through ``JWTService``.
"""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from quotevote.config import AuthSettings
from quotevote.domain.error import (
    AlreadyExistsError,
    UnauthorizedError,
    ValidationError,
)
from quotevote.domain.model.quote import utcnow
from quotevote.domain.model.user import User
from quotevote.domain.repository import UserRepository
from quotevote.domain.value import UserId, Username
from quotevote.util.password import MAX_PASSWORD_BYTES, hash_password, verify_password

from .base import Service
from .jwt_service import JWTService

INVALID_CREDENTIALS = "incorrect username or password"


class AuthService(Service):
    """Domain service for account registration and login."""

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            jwt_service: Token issuing service
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.jwt_service = jwt_service
        self.auth_settings = auth_settings

    async def register(self, username: str, password: str) -> User:
        """Register a new account.

        Args:
            username: Desired username
            password: Plain-text password

        Returns:
            Created user

        Raises:
            ValidationError: If username or password is malformed
            AlreadyExistsError: If the username is already taken
        """
        handle = self._parse_username(username)
        self._check_password(password)

        with logfire.span("auth_service.register", username=handle.root):
            if await self.user_repository.find_by_username(handle) is not None:
                logfire.warn("Username already exists", username=handle.root)
                raise AlreadyExistsError("username already exists")

            user = User(
                id=UserId(uuid4()),
                username=handle,
                password_hash=hash_password(password),
                created_at=utcnow(),
            )

            saved = await self.user_repository.insert(user)
            if saved is None:
                # Lost a race with a concurrent registration
                logfire.warn("Username taken during insert", username=handle.root)
                raise AlreadyExistsError("username already exists")

            logfire.info("User registered", username=handle.root)
            return saved

    async def login(self, username: str, password: str) -> str:
        """Verify credentials and issue a bearer token.

        Args:
            username: Username
            password: Plain-text password

        Returns:
            Signed JWT token

        Raises:
            UnauthorizedError: If the username is unknown or the password is wrong
        """
        with logfire.span("auth_service.login", username=username):
            try:
                handle = Username(username)
            except PydanticValidationError:
                raise UnauthorizedError(INVALID_CREDENTIALS)

            user = await self.user_repository.find_by_username(handle)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt", username=username)
                raise UnauthorizedError(INVALID_CREDENTIALS)

            logfire.info("User logged in", username=username)
            return self.jwt_service.create_token(user.username.root)

    @staticmethod
    def _parse_username(username: str) -> Username:
        """Validate a username, mapping failures to a domain error."""
        try:
            return Username(username)
        except PydanticValidationError as e:
            raise ValidationError(e.errors()[0]["msg"])

    def _check_password(self, password: str) -> None:
        """Validate password length bounds."""
        if len(password) < self.auth_settings.min_password_length:
            raise ValidationError(
                f"password must be at least "
                f"{self.auth_settings.min_password_length} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"password must be at most {MAX_PASSWORD_BYTES} bytes"
            )
