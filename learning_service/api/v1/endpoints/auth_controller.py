import logging

from fastapi import APIRouter, Depends

from learning_service.dependencies.services import get_user_service
from learning_service.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from learning_service.schemas.generic import ApiResponse
from learning_service.services.auth_service import AuthService
from learning_service.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse],
    status_code=201,
    summary="Register",
    description="Create an instructor or student account and return a bearer token.",
)
async def register(
        request: RegisterRequest,
        user_service: UserService = Depends(get_user_service),
) -> ApiResponse[AuthResponse]:
    data = await user_service.register(request.email, request.password, request.role)
    return ApiResponse[AuthResponse].success(data=data, message="Registered")


@router.post(
    "/login",
    response_model=ApiResponse[AuthResponse],
    summary="Login",
)
async def login(
        request: LoginRequest,
        user_service: UserService = Depends(get_user_service),
) -> ApiResponse[AuthResponse]:
    data = await user_service.login(request.email, request.password)
    return ApiResponse[AuthResponse].success(data=data)


@router.get(
    "/me",
    response_model=ApiResponse[UserResponse],
    summary="Current user",
)
async def me(
        user: CurrentUser = Depends(AuthService.get_current_user),
) -> ApiResponse[UserResponse]:
    return ApiResponse[UserResponse].success(
        data=UserResponse(id=user.id, email=user.email, role=user.role)
    )
