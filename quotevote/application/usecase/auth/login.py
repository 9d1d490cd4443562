"""Login use case."""

from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import AuthService


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response carrying the bearer token."""

    token: str


class LoginUseCase(BaseUseCase[LoginRequest, LoginResponse]):
    """Use case for exchanging credentials for a bearer token."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            UnauthorizedError: If the credentials are wrong
        """
        token = await self.auth_service.login(request.username, request.password)
        return LoginResponse(token=token)
