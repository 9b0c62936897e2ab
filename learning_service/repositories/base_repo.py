from typing import TypeVar, Generic, Type, Optional, Any

from sqlalchemy import select, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from learning_service.model.base import Base

# Generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with the common data access helpers.

    Repositories only flush; the calling service owns the transaction and
    decides when to commit or roll back.

    Usage:
        class UserRepository(BaseRepository[User]):
            def __init__(self, session: AsyncSession):
                super().__init__(User, session)
    """
    model: Type[ModelType]

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    # ==================== CREATE ====================

    async def add(self, obj_in: dict | ModelType) -> ModelType:
        """
        Stage a new record and flush it so generated ids are available.

        Args:
            obj_in: Dictionary or model instance with data to create

        Returns:
            The pending model instance
        """
        if isinstance(obj_in, dict):
            db_obj = self.model(**obj_in)
        else:
            db_obj = obj_in

        self.session.add(db_obj)
        await self.session.flush()
        return db_obj

    # ==================== READ ====================

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Get a single record by ID.

        Args:
            id: Primary key ID

        Returns:
            Model instance or None if not found
        """
        query = select(self.model).where(self.model.id == id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """
        Get a single record by a specific field value.

        Args:
            field: Field name to filter by
            value: Value to match

        Returns:
            Model instance or None if not found
        """
        query = select(self.model).where(getattr(self.model, field) == value)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    # ==================== COUNT ====================

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(self.model.id)))
        return result.scalar() or 0

    async def count_by_filters(self, filters: dict[str, Any]) -> int:
        """
        Count records matching filter conditions.

        Args:
            filters: Dictionary of field-value pairs to filter by

        Returns:
            Count of matching records
        """
        conditions = [getattr(self.model, field) == value for field, value in filters.items()]
        query = select(func.count(self.model.id)).where(and_(*conditions))

        result = await self.session.execute(query)
        return result.scalar() or 0

    # ==================== TRANSACTION ====================

    async def commit(self):
        """Commit the current transaction."""
        await self.session.commit()

    async def rollback(self):
        """Roll back the current transaction."""
        await self.session.rollback()
