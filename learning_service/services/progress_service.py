"""
Progress Service - sequential unlock and completion tracking.

A lecture is unlocked for a user when it is the first lecture of its course
or when the lecture right before it (by order_index) has a progress record
for that user. Any quiz submission counts as completion, passed or not.
"""

import logging
from typing import Collection, Sequence

from sqlalchemy.exc import IntegrityError

from learning_service.model.course_models import Lecture
from learning_service.model.enums import CompletionResult, LectureType, ProgressStatus
from learning_service.model.progress_models import ProgressRecord
from learning_service.repositories.course_repo import CourseRepository
from learning_service.repositories.lecture_repo import LectureRepository
from learning_service.repositories.progress_repo import ProgressRepository
from learning_service.schemas.auth import CurrentUser
from learning_service.schemas.progress import (
    CompletedLecturesResponse,
    CourseProgressResponse,
)
from learning_service.utils.exceptions import (
    AccessDeniedException,
    BadRequestException,
    ResourceNotFoundException,
)

logger = logging.getLogger(__name__)


def is_lecture_unlocked(
        ordered_lecture_ids: Sequence[int],
        completed_lecture_ids: Collection[int],
        lecture_id: int,
) -> bool:
    """Unlocked iff first in the course or its predecessor is completed."""
    idx = list(ordered_lecture_ids).index(lecture_id)
    return idx == 0 or ordered_lecture_ids[idx - 1] in completed_lecture_ids


def completion_ratio(completed: int, total: int) -> float:
    return completed / total if total else 0.0


class ProgressService:
    def __init__(
            self,
            course_repository: CourseRepository,
            lecture_repository: LectureRepository,
            progress_repository: ProgressRepository,
    ):
        self._course_repository = course_repository
        self._lecture_repository = lecture_repository
        self._progress_repository = progress_repository

    async def get_lecture(self, lecture_id: int) -> Lecture:
        lecture = await self._lecture_repository.get_by_id(lecture_id)
        if not lecture:
            raise ResourceNotFoundException("Lecture not found")
        return lecture

    async def is_unlocked(self, user: CurrentUser, lecture: Lecture) -> bool:
        ordered_ids = await self._lecture_repository.get_ordered_ids(lecture.course_id)
        completed_ids = await self._progress_repository.get_completed_lecture_ids(
            user.id, lecture.course_id
        )
        return is_lecture_unlocked(ordered_ids, set(completed_ids), lecture.id)

    async def ensure_unlocked(self, user: CurrentUser, lecture: Lecture) -> None:
        """
        Raises:
            AccessDeniedException: the previous lecture is not completed yet
        """
        if not await self.is_unlocked(user, lecture):
            raise AccessDeniedException(
                "Lecture is locked: complete the previous lecture first"
            )

    async def check_access(self, user: CurrentUser, lecture_id: int) -> bool:
        lecture = await self.get_lecture(lecture_id)
        return await self.is_unlocked(user, lecture)

    async def complete_reading(self, user: CurrentUser, lecture_id: int) -> CompletionResult:
        """
        Record that the user viewed a reading lecture. Idempotent: repeated
        calls report ALREADY_COMPLETED and never add a second record.
        """
        lecture = await self.get_lecture(lecture_id)
        if lecture.type != LectureType.READING:
            raise BadRequestException("Only for reading lectures")

        if await self._progress_repository.has_completed(user.id, lecture.id):
            return CompletionResult.ALREADY_COMPLETED

        await self.ensure_unlocked(user, lecture)

        record = ProgressRecord(
            user_id=user.id,
            course_id=lecture.course_id,
            lecture_id=lecture.id,
            status=ProgressStatus.COMPLETED.value,
        )
        try:
            await self._progress_repository.add(record)
            await self._progress_repository.commit()
        except IntegrityError:
            # A concurrent request recorded it first
            await self._progress_repository.rollback()
            return CompletionResult.ALREADY_COMPLETED

        logger.info(f"User {user.id} completed reading lecture {lecture.id}")
        return CompletionResult.COMPLETED

    async def get_course_progress(self, user: CurrentUser, course_id: int) -> CourseProgressResponse:
        await self._require_course(course_id)
        total = await self._lecture_repository.count_by_course(course_id)
        completed = await self._progress_repository.count_completed(user.id, course_id)
        return CourseProgressResponse(
            completed=completed,
            total=total,
            ratio=completion_ratio(completed, total),
        )

    async def get_completed_lectures(
            self, user: CurrentUser, course_id: int
    ) -> CompletedLecturesResponse:
        await self._require_course(course_id)
        ids = await self._progress_repository.get_completed_lecture_ids(user.id, course_id)
        return CompletedLecturesResponse(completed_lecture_ids=ids)

    async def _require_course(self, course_id: int) -> None:
        if not await self._course_repository.get_by_id(course_id):
            raise ResourceNotFoundException("Course not found")
