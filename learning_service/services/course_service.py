"""
Course Service - course creation and browsing
"""

import logging
from typing import List

from learning_service.model.course_models import Course
from learning_service.repositories.course_repo import CourseRepository
from learning_service.schemas.auth import CurrentUser
from learning_service.schemas.course import (
    CourseDetailResponse,
    CourseLectureItem,
    CourseResponse,
    CourseSummary,
)
from learning_service.utils.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class CourseService:
    def __init__(self, course_repository: CourseRepository):
        self._course_repository = course_repository

    async def create_course(
            self, user: CurrentUser, title: str, description: str
    ) -> CourseResponse:
        course = Course(title=title, description=description, instructor_id=user.id)
        await self._course_repository.add(course)
        await self._course_repository.commit()
        logger.info(f"Instructor {user.id} created course {course.id}")
        return CourseResponse.model_validate(course)

    async def list_courses(self) -> List[CourseSummary]:
        rows = await self._course_repository.list_with_stats()
        return [CourseSummary(**row) for row in rows]

    async def get_course_detail(self, course_id: int) -> CourseDetailResponse:
        course = await self._course_repository.get_course_with_lectures(course_id)
        if not course:
            raise ResourceNotFoundException("Course not found")

        return CourseDetailResponse(
            id=course.id,
            title=course.title,
            description=course.description,
            instructor_id=course.instructor_id,
            created_at=course.created_date,
            lectures=[CourseLectureItem.model_validate(lec) for lec in course.lectures],
        )
