from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from learning_service.dependencies.db import get_database
from learning_service.repositories.course_repo import CourseRepository
from learning_service.repositories.lecture_repo import LectureRepository
from learning_service.repositories.progress_repo import ProgressRepository
from learning_service.repositories.quiz_repo import QuizRepository
from learning_service.repositories.user_repo import UserRepository
from learning_service.services.course_service import CourseService
from learning_service.services.lecture_service import LectureService
from learning_service.services.progress_service import ProgressService
from learning_service.services.quiz_grader import QuizGrader
from learning_service.services.user_service import UserService


# =============================
#   Repository Dependencies
# =============================
async def get_user_repository(
        session: AsyncSession = Depends(get_database),
) -> UserRepository:
    return UserRepository(session)


async def get_course_repository(
        session: AsyncSession = Depends(get_database),
) -> CourseRepository:
    return CourseRepository(session)


async def get_lecture_repository(
        session: AsyncSession = Depends(get_database),
) -> LectureRepository:
    return LectureRepository(session)


async def get_quiz_repository(
        session: AsyncSession = Depends(get_database),
) -> QuizRepository:
    return QuizRepository(session)


async def get_progress_repository(
        session: AsyncSession = Depends(get_database),
) -> ProgressRepository:
    return ProgressRepository(session)


# =============================
#   Services (Per-Request)
# =============================
# FastAPI caches get_database within a request, so every repository of one
# service shares the same session and transaction.
async def get_user_service(
        user_repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(user_repository)


async def get_course_service(
        course_repository: CourseRepository = Depends(get_course_repository),
) -> CourseService:
    return CourseService(course_repository)


async def get_lecture_service(
        course_repository: CourseRepository = Depends(get_course_repository),
        lecture_repository: LectureRepository = Depends(get_lecture_repository),
        quiz_repository: QuizRepository = Depends(get_quiz_repository),
) -> LectureService:
    return LectureService(
        course_repository=course_repository,
        lecture_repository=lecture_repository,
        quiz_repository=quiz_repository,
    )


async def get_progress_service(
        course_repository: CourseRepository = Depends(get_course_repository),
        lecture_repository: LectureRepository = Depends(get_lecture_repository),
        progress_repository: ProgressRepository = Depends(get_progress_repository),
) -> ProgressService:
    return ProgressService(
        course_repository=course_repository,
        lecture_repository=lecture_repository,
        progress_repository=progress_repository,
    )


async def get_quiz_grader(
        progress_service: ProgressService = Depends(get_progress_service),
        quiz_repository: QuizRepository = Depends(get_quiz_repository),
        progress_repository: ProgressRepository = Depends(get_progress_repository),
) -> QuizGrader:
    return QuizGrader(
        progress_service=progress_service,
        quiz_repository=quiz_repository,
        progress_repository=progress_repository,
    )
