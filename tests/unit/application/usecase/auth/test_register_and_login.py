"""Unit tests for RegisterUseCase and LoginUseCase."""

import pytest

from quotevote.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from quotevote.domain.error import UnauthorizedError
from quotevote.domain.service import JWTService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterAndLogin:
    @pytest.mark.asyncio
    async def test_register_then_login(self, unit_env):
        """A registered user can log in and the token names them."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        registered = await register.execute(
            RegisterRequest(username="alice", password="s3cret-pass")
        )
        response = await login.execute(
            LoginRequest(username="alice", password="s3cret-pass")
        )

        # Assert
        assert registered.message == "User registered"
        assert registered.username == "alice"
        assert jwt_service.verify_credential(response.token) == "alice"

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, unit_env):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(UnauthorizedError):
            await login.execute(LoginRequest(username="ghost", password="whatever"))
