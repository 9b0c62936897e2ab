from datetime import datetime, timedelta, timezone
from typing import Callable

import bcrypt
import jwt
from fastapi import Depends, Request

from learning_service.config import get_settings
from learning_service.model.enums import UserRole
from learning_service.model.user_models import User
from learning_service.schemas.auth import CurrentUser
from learning_service.utils.exceptions import (
    AccessDeniedException,
    UnauthorizedException,
)


class AuthService:
    @staticmethod
    def hash_password(password: str) -> str:
        salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))

    @staticmethod
    def create_access_token(user: User) -> str:
        settings = get_settings()
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "role": UserRole(user.role).value,
            "iat": now,
            "exp": now + timedelta(days=settings.access_token_expire_days),
        }
        return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    @staticmethod
    def get_current_user(request: Request) -> CurrentUser:
        decoded = AuthService._get_decoded_jwt(request)

        try:
            return CurrentUser(
                id=int(decoded["sub"]),
                email=decoded["email"],
                role=UserRole(decoded["role"]),
            )
        except (KeyError, TypeError, ValueError):
            raise UnauthorizedException("Invalid token")

    @staticmethod
    def require_role(role: UserRole) -> Callable[..., CurrentUser]:
        """Dependency factory: the caller must be authenticated with `role`."""

        def _check_role(
                user: CurrentUser = Depends(AuthService.get_current_user),
        ) -> CurrentUser:
            if user.role != role:
                raise AccessDeniedException("Forbidden")
            return user

        return _check_role

    @staticmethod
    def _get_decoded_jwt(request: Request) -> dict:
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            raise UnauthorizedException("Missing token")
        if not auth_header.startswith("Bearer "):
            raise UnauthorizedException("Invalid Authorization header format")
        token = auth_header[len("Bearer "):].strip()
        if not token:
            raise UnauthorizedException("Missing token")

        settings = get_settings()
        try:
            decoded = jwt.decode(
                token,
                settings.jwt_secret,
                algorithms=[settings.jwt_algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise UnauthorizedException("Token expired")
        except jwt.InvalidTokenError:
            raise UnauthorizedException("Invalid token")
        return decoded
