"""
Progress Repository - Data access layer for per-user lecture progress
"""
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from learning_service.model.course_models import Lecture
from learning_service.model.enums import ProgressStatus
from learning_service.model.progress_models import ProgressRecord
from learning_service.repositories.base_repo import BaseRepository


class ProgressRepository(BaseRepository[ProgressRecord]):
    """
    Repository for ProgressRecord entity
    """

    def __init__(self, session: AsyncSession):
        super().__init__(ProgressRecord, session)

    async def get_record(self, user_id: int, lecture_id: int) -> Optional[ProgressRecord]:
        query = select(ProgressRecord).where(
            ProgressRecord.user_id == user_id,
            ProgressRecord.lecture_id == lecture_id,
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def has_completed(self, user_id: int, lecture_id: int) -> bool:
        return await self.count_by_filters(
            {"user_id": user_id, "lecture_id": lecture_id}
        ) > 0

    async def get_completed_lecture_ids(self, user_id: int, course_id: int) -> List[int]:
        """
        Ids of the course's lectures the user has a record for, in
        order_index order.
        """
        query = (
            select(ProgressRecord.lecture_id)
            .join(Lecture, Lecture.id == ProgressRecord.lecture_id)
            .where(ProgressRecord.user_id == user_id)
            .where(Lecture.course_id == course_id)
            .order_by(Lecture.order_index)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_completed(self, user_id: int, course_id: int) -> int:
        """Number of distinct lectures of the course completed by the user."""
        query = (
            select(func.count(func.distinct(ProgressRecord.lecture_id)))
            .join(Lecture, Lecture.id == ProgressRecord.lecture_id)
            .where(ProgressRecord.user_id == user_id)
            .where(Lecture.course_id == course_id)
        )
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def save_quiz_result(
        self,
        user_id: int,
        course_id: int,
        lecture_id: int,
        score: int,
        total: int,
        passed: bool,
    ) -> ProgressRecord:
        """
        Insert the user's record for a quiz lecture or overwrite the score of
        the existing one. The status of an existing record is left untouched.
        """
        record = await self.get_record(user_id, lecture_id)
        if record is None:
            record = ProgressRecord(
                user_id=user_id,
                course_id=course_id,
                lecture_id=lecture_id,
                status=ProgressStatus.PASSED_QUIZ.value,
            )
            self.session.add(record)

        record.score = score
        record.total = total
        record.passed = passed
        await self.session.flush()
        return record
