"""
Quiz Grader - server-side scoring of quiz submissions.

Every submission is persisted: the first one creates the user's progress
record for the lecture, later ones overwrite score, total and passed in place.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from learning_service.model.enums import LectureType
from learning_service.model.quiz_models import Question
from learning_service.repositories.progress_repo import ProgressRepository
from learning_service.repositories.quiz_repo import QuizRepository
from learning_service.schemas.auth import CurrentUser
from learning_service.services.progress_service import ProgressService
from learning_service.utils.exceptions import BadRequestException

logger = logging.getLogger(__name__)

PASS_THRESHOLD = 0.7


@dataclass(frozen=True)
class GradeResult:
    score: int
    total: int
    passed: bool


def parse_option_id(value: Any) -> Optional[int]:
    """Selected option id as an int, or None when it cannot name an option."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def grade_answers(questions: Sequence[Question], answers: Mapping[Any, Any]) -> GradeResult:
    """
    Score answers against the questions' stored correct options.

    Missing, malformed, unknown or mismatched answers are simply wrong.
    A quiz without questions always passes.
    """
    by_key = {str(key): value for key, value in answers.items()}
    total = len(questions)
    score = 0
    for question in questions:
        option_id = parse_option_id(by_key.get(str(question.id)))
        if option_id is not None and question.is_correct_option(option_id):
            score += 1

    passed = True if total == 0 else score / total >= PASS_THRESHOLD
    return GradeResult(score=score, total=total, passed=passed)


class QuizGrader:
    def __init__(
            self,
            progress_service: ProgressService,
            quiz_repository: QuizRepository,
            progress_repository: ProgressRepository,
    ):
        self._progress_service = progress_service
        self._quiz_repository = quiz_repository
        self._progress_repository = progress_repository

    async def grade(self, lecture_id: int, answers: Mapping[Any, Any]) -> GradeResult:
        questions = await self._quiz_repository.get_questions_with_options(lecture_id)
        return grade_answers(questions, answers)

    async def submit(
            self, user: CurrentUser, lecture_id: int, answers: Mapping[Any, Any]
    ) -> GradeResult:
        """
        Grade a submission and upsert the user's progress record.

        Raises:
            ResourceNotFoundException: lecture does not exist
            BadRequestException: lecture is not a quiz
            AccessDeniedException: lecture is still locked for the user
        """
        lecture = await self._progress_service.get_lecture(lecture_id)
        if lecture.type != LectureType.QUIZ:
            raise BadRequestException("Not a quiz lecture")

        if not await self._progress_repository.has_completed(user.id, lecture.id):
            await self._progress_service.ensure_unlocked(user, lecture)

        # Rollback expires the ORM instance, so keep plain ids for the retry
        lecture_id, course_id = lecture.id, lecture.course_id
        result = await self.grade(lecture_id, answers)

        try:
            await self._save(user, course_id, lecture_id, result)
        except IntegrityError:
            # Lost the race to insert; overwrite the record that won
            await self._progress_repository.rollback()
            await self._save(user, course_id, lecture_id, result)

        logger.info(
            f"User {user.id} submitted quiz {lecture_id}: "
            f"{result.score}/{result.total} passed={result.passed}"
        )
        return result

    async def _save(
            self, user: CurrentUser, course_id: int, lecture_id: int, result: GradeResult
    ) -> None:
        await self._progress_repository.save_quiz_result(
            user_id=user.id,
            course_id=course_id,
            lecture_id=lecture_id,
            score=result.score,
            total=result.total,
            passed=result.passed,
        )
        await self._progress_repository.commit()
