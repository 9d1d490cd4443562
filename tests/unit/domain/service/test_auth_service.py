"""Unit tests for AuthService and JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from quotevote.config import AuthSettings
from quotevote.domain.error import (
    AlreadyExistsError,
    UnauthorizedError,
    ValidationError,
)
from quotevote.domain.repository import UserRepository
from quotevote.domain.service import AuthService, JWTService
from quotevote.domain.value import Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for AuthService.register."""

    @pytest.mark.asyncio
    async def test_register_stores_hashed_password(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await auth_service.register("alice", "s3cret-pass")

        # Assert
        stored = await user_repo.find_by_username(Username("alice"))
        assert stored == user
        assert stored.password_hash != "s3cret-pass"
        assert stored.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_username_conflicts(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "s3cret-pass")

        with pytest.raises(AlreadyExistsError, match="username already exists"):
            await auth_service.register("alice", "another-pass")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["ab", "has space", "x" * 51])
    async def test_invalid_username_rejected(self, unit_env, username):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            await auth_service.register(username, "s3cret-pass")

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="at least"):
            await auth_service.register("alice", "abc")

    @pytest.mark.asyncio
    async def test_overlong_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="at most 72 bytes"):
            await auth_service.register("alice", "p" * 73)


class TestLogin:
    """Tests for AuthService.login."""

    @pytest.mark.asyncio
    async def test_login_returns_verifiable_token(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        jwt_service = await unit_env.get(JWTService)
        await auth_service.register("alice", "s3cret-pass")

        # Act
        token = await auth_service.login("alice", "s3cret-pass")

        # Assert
        assert jwt_service.verify_credential(token) == "alice"

    @pytest.mark.asyncio
    async def test_wrong_password_unauthorized(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "s3cret-pass")

        with pytest.raises(UnauthorizedError, match="incorrect username or password"):
            await auth_service.login("alice", "wrong-pass")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["nobody", "?"])
    async def test_unknown_user_unauthorized(self, unit_env, username):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(UnauthorizedError, match="incorrect username or password"):
            await auth_service.login(username, "s3cret-pass")


class TestVerifyCredential:
    """Tests for JWTService.verify_credential."""

    def test_missing_token(self):
        jwt_service = JWTService(auth_settings=AuthSettings())

        with pytest.raises(UnauthorizedError, match="authentication required"):
            jwt_service.verify_credential(None)

    def test_garbage_token(self):
        jwt_service = JWTService(auth_settings=AuthSettings())

        with pytest.raises(UnauthorizedError, match="Invalid token"):
            jwt_service.verify_credential("not-a-jwt")

    def test_token_signed_with_other_secret(self):
        settings = AuthSettings()
        other = AuthSettings(jwt_secret="some-other-secret-that-is-long-enough")
        token = JWTService(auth_settings=other).create_token("alice")

        with pytest.raises(UnauthorizedError, match="Invalid token"):
            JWTService(auth_settings=settings).verify_credential(token)

    def test_expired_token(self):
        settings = AuthSettings()
        token = jwt.encode(
            {
                "username": "alice",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(UnauthorizedError, match="expired"):
            JWTService(auth_settings=settings).verify_credential(token)
