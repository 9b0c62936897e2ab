"""
User Repository - Data access layer for accounts
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from learning_service.model.user_models import User
from learning_service.repositories.base_repo import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User entity
    """

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Emails are stored lower-cased, so the lookup is case-insensitive."""
        return await self.get_by_field("email", email.lower())

    async def get_first_by_role(self, role: str) -> Optional[User]:
        query = select(User).where(User.role == role).order_by(User.id).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
