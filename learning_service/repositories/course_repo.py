"""
Course Repository - Data access layer for courses
"""

from typing import Optional, Sequence

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from learning_service.model.course_models import Course, Lecture
from learning_service.model.user_models import User
from learning_service.repositories.base_repo import BaseRepository


class CourseRepository(BaseRepository[Course]):
    """
    Repository for Course entity
    """

    def __init__(self, session: AsyncSession):
        super().__init__(Course, session)

    async def get_for_update(self, course_id: int) -> Optional[Course]:
        """
        Get a course and lock its row until the transaction ends.

        Lecture authoring takes this lock before reading the current maximum
        order index. Backends without row locks (SQLite) ignore FOR UPDATE and
        rely on their database-wide write lock plus the unique constraint.
        """
        query = select(Course).where(Course.id == course_id).with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_with_stats(self) -> Sequence[dict]:
        """
        List every course, newest first, with its instructor email and
        lecture count.

        SQL equivalent:
            SELECT c.id, c.title, c.description, c.created_date,
                   u.email AS instructor_email,
                   (SELECT COUNT(*) FROM lectures l WHERE l.course_id = c.id) AS lectures
            FROM courses c JOIN users u ON u.id = c.instructor_id
            ORDER BY c.created_date DESC
        """
        lecture_count = (
            select(func.count(Lecture.id))
            .where(Lecture.course_id == Course.id)
            .correlate(Course)
            .scalar_subquery()
        )
        query = (
            select(
                Course.id,
                Course.title,
                Course.description,
                Course.created_date,
                User.email.label("instructor_email"),
                lecture_count.label("lectures"),
            )
            .join(User, User.id == Course.instructor_id)
            .order_by(Course.created_date.desc(), Course.id.desc())
        )

        result = await self.session.execute(query)
        return [
            {
                "id": row.id,
                "title": row.title,
                "description": row.description,
                "created_at": row.created_date,
                "instructor_email": row.instructor_email,
                "lectures": row.lectures,
            }
            for row in result.all()
        ]

    async def get_course_with_lectures(self, course_id: int) -> Optional[Course]:
        """
        Get a course with its lectures loaded in order_index order.
        """
        query = (
            select(Course)
            .options(selectinload(Course.lectures))
            .where(Course.id == course_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
