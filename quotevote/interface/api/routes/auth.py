"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from quotevote.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account.

    Args:
        request: Username and password
        register_use_case: Register use case from DI

    Returns:
        Confirmation with the registered username
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange username and password for a bearer token.

    Args:
        request: Username and password
        login_use_case: Login use case from DI

    Returns:
        Signed bearer token
    """
    return await login_use_case.execute(request)
