"""
Lecture Service - lecture ordering, quiz authoring and lecture views.

Authoring is all-or-nothing: the lecture row, its order index, and every
question and option are written in one transaction that is rolled back on any
failure.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from learning_service.model.course_models import Lecture
from learning_service.model.enums import LectureType
from learning_service.repositories.course_repo import CourseRepository
from learning_service.repositories.lecture_repo import LectureRepository
from learning_service.repositories.quiz_repo import QuizRepository
from learning_service.schemas.auth import CurrentUser
from learning_service.schemas.lecture import (
    CreateLectureRequest,
    LectureCreatedResponse,
    LectureDetailResponse,
    QuestionInput,
    QuestionView,
)
from learning_service.utils.exceptions import (
    AccessDeniedException,
    BadRequestException,
    ConflictException,
    ResourceNotFoundException,
)

logger = logging.getLogger(__name__)

MIN_OPTIONS_PER_QUESTION = 2


def validate_quiz_questions(questions: Optional[List[QuestionInput]]) -> None:
    """
    Check a quiz authoring payload before anything is written.

    Raises:
        BadRequestException: no questions, a question without text, a question
            with fewer than two options, or a question with no correct option
    """
    if not questions:
        raise BadRequestException("questions required for quiz")

    for position, question in enumerate(questions, start=1):
        if not question.text or not question.text.strip():
            raise BadRequestException(f"invalid question #{position}: text required")
        if len(question.options) < MIN_OPTIONS_PER_QUESTION:
            raise BadRequestException(
                f"invalid question #{position}: at least "
                f"{MIN_OPTIONS_PER_QUESTION} options required"
            )
        if not any(option.is_correct for option in question.options):
            raise BadRequestException(
                f"invalid question #{position}: at least one correct option required"
            )


class LectureService:
    def __init__(
            self,
            course_repository: CourseRepository,
            lecture_repository: LectureRepository,
            quiz_repository: QuizRepository,
    ):
        self._course_repository = course_repository
        self._lecture_repository = lecture_repository
        self._quiz_repository = quiz_repository

    async def create_lecture(
            self,
            user: CurrentUser,
            course_id: int,
            request: CreateLectureRequest,
    ) -> LectureCreatedResponse:
        """
        Append a lecture to a course owned by the caller.

        Raises:
            ResourceNotFoundException: course does not exist
            AccessDeniedException: caller does not own the course
            BadRequestException: invalid quiz payload
            ConflictException: order index collision from concurrent authoring
        """
        try:
            course = await self._course_repository.get_for_update(course_id)
            if not course:
                raise ResourceNotFoundException("Course not found")
            if course.instructor_id != user.id:
                raise AccessDeniedException("Not your course")

            if request.type == LectureType.QUIZ:
                validate_quiz_questions(request.questions)

            order_index = await self._lecture_repository.next_order_index(course_id)
            lecture = Lecture(
                course_id=course_id,
                order_index=order_index,
                type=request.type.value,
                title=request.title,
                content=(request.content or "") if request.type == LectureType.READING else None,
            )
            await self._lecture_repository.add(lecture)

            if request.type == LectureType.QUIZ:
                await self._quiz_repository.add_questions_to_lecture(
                    lecture,
                    [question.model_dump() for question in request.questions],
                )

            await self._lecture_repository.commit()
        except IntegrityError:
            await self._lecture_repository.rollback()
            logger.warning(f"Order index collision while adding a lecture to course {course_id}")
            raise ConflictException("Lecture order collision, please retry")
        except Exception:
            await self._lecture_repository.rollback()
            raise

        logger.info(
            f"Instructor {user.id} added {lecture.type} lecture {lecture.id} "
            f"to course {course_id} at position {lecture.order_index}"
        )
        return LectureCreatedResponse.model_validate(lecture)

    async def get_lecture_detail(self, lecture_id: int) -> LectureDetailResponse:
        """
        Lecture view for learners. Quiz questions come with their options but
        without correctness flags.
        """
        lecture = await self._lecture_repository.get_by_id(lecture_id)
        if not lecture:
            raise ResourceNotFoundException("Lecture not found")

        questions = None
        if lecture.type == LectureType.QUIZ:
            rows = await self._quiz_repository.get_questions_with_options(lecture_id)
            questions = [QuestionView.model_validate(question) for question in rows]

        return LectureDetailResponse(
            id=lecture.id,
            course_id=lecture.course_id,
            order_index=lecture.order_index,
            type=LectureType(lecture.type),
            title=lecture.title,
            content=lecture.content,
            questions=questions,
        )
