"""Register use case."""

from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import AuthService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    password: str


class RegisterResponse(BaseModel):
    """Register response."""

    message: str = "User registered"
    username: str


class RegisterUseCase(BaseUseCase[RegisterRequest, RegisterResponse]):
    """Use case for creating an account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Raises:
            ValidationError: If username or password is malformed
            AlreadyExistsError: If the username is taken
        """
        user = await self.auth_service.register(request.username, request.password)
        return RegisterResponse(username=user.username.root)
