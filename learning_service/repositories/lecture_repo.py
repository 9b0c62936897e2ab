"""
Lecture Repository - Data access layer for lectures and their ordering
"""
from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from learning_service.model.course_models import Lecture
from learning_service.repositories.base_repo import BaseRepository


class LectureRepository(BaseRepository[Lecture]):
    """
    Repository for Lecture entity
    """

    def __init__(self, session: AsyncSession):
        super().__init__(Lecture, session)

    async def next_order_index(self, course_id: int) -> int:
        """
        1 + the highest order_index in the course, or 1 for an empty course.

        Must run inside the transaction that inserts the new lecture.
        """
        query = select(func.coalesce(func.max(Lecture.order_index), 0)).where(
            Lecture.course_id == course_id
        )
        result = await self.session.execute(query)
        return (result.scalar() or 0) + 1

    async def get_ordered_ids(self, course_id: int) -> List[int]:
        """Lecture ids of a course in order_index order."""
        query = (
            select(Lecture.id)
            .where(Lecture.course_id == course_id)
            .order_by(Lecture.order_index)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by_course(self, course_id: int) -> int:
        return await self.count_by_filters({"course_id": course_id})
