"""
Pytest configuration and fixtures for all tests.

Environment variables are set before the application package is imported so
the cached settings and the module-level engine pick them up. Every test gets
its own in-memory SQLite database.
"""

import os
import typing

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret-0123456789abcdef0123456789abcdef"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from learning_service.db.session import (
    create_session_factory,
    enable_sqlite_foreign_keys,
    init_db,
)
from learning_service.dependencies.db import get_database
from learning_service.main import app
from learning_service.model.enums import UserRole
from learning_service.model.user_models import User
from learning_service.schemas.auth import CurrentUser
from learning_service.services.auth_service import AuthService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
async def session(session_factory) -> typing.AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> typing.AsyncIterator[AsyncClient]:
    """HTTP client bound to the app with the test database injected."""

    async def override_get_database():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_database] = override_get_database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    """Factory that inserts a user and returns its CurrentUser identity."""

    async def _make_user(email: str, role: UserRole = UserRole.STUDENT) -> CurrentUser:
        user = User(
            email=email,
            password_hash=AuthService.hash_password("password"),
            role=role.value,
        )
        session.add(user)
        await session.commit()
        return CurrentUser(id=user.id, email=user.email, role=role)

    return _make_user

