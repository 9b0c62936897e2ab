"""
User Service - registration and login
"""

import logging

from sqlalchemy.exc import IntegrityError

from learning_service.model.enums import UserRole
from learning_service.model.user_models import User
from learning_service.repositories.user_repo import UserRepository
from learning_service.schemas.auth import AuthResponse, UserResponse
from learning_service.services.auth_service import AuthService
from learning_service.utils.exceptions import (
    BadRequestException,
    ConflictException,
    UnauthorizedException,
)

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def register(self, email: str, password: str, role: UserRole) -> AuthResponse:
        email = email.strip().lower()
        if not email or not password:
            raise BadRequestException(
                "email, password and role (instructor|student) required"
            )

        if await self._user_repository.get_by_email(email):
            raise ConflictException("User already exists")

        user = User(
            email=email,
            password_hash=AuthService.hash_password(password),
            role=role.value,
        )
        try:
            await self._user_repository.add(user)
            await self._user_repository.commit()
        except IntegrityError:
            await self._user_repository.rollback()
            raise ConflictException("User already exists")

        logger.info(f"Registered {role.value} {user.id}")
        return self._auth_response(user)

    async def login(self, email: str, password: str) -> AuthResponse:
        user = await self._user_repository.get_by_email(email.strip())
        if not user or not AuthService.verify_password(password, user.password_hash):
            raise UnauthorizedException("Invalid credentials")
        return self._auth_response(user)

    @staticmethod
    def _auth_response(user: User) -> AuthResponse:
        return AuthResponse(
            user=UserResponse(id=user.id, email=user.email, role=UserRole(user.role)),
            token=AuthService.create_access_token(user),
        )
