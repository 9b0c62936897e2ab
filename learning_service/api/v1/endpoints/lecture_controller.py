import logging

from fastapi import APIRouter, Depends

from learning_service.dependencies.services import (
    get_lecture_service,
    get_progress_service,
    get_quiz_grader,
)
from learning_service.schemas.auth import CurrentUser
from learning_service.schemas.generic import ApiResponse
from learning_service.schemas.lecture import (
    CompletionResponse,
    GradeResponse,
    LectureAccessResponse,
    LectureDetailResponse,
    SubmitQuizRequest,
)
from learning_service.services.auth_service import AuthService
from learning_service.services.lecture_service import LectureService
from learning_service.services.progress_service import ProgressService
from learning_service.services.quiz_grader import QuizGrader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lectures", tags=["Lectures"])


@router.get(
    "/{lecture_id}",
    response_model=ApiResponse[LectureDetailResponse],
    summary="Lecture Detail",
    description="Reading content, or quiz questions with options (correctness hidden).",
)
async def get_lecture(
        lecture_id: int,
        lecture_service: LectureService = Depends(get_lecture_service),
) -> ApiResponse[LectureDetailResponse]:
    data = await lecture_service.get_lecture_detail(lecture_id)
    return ApiResponse[LectureDetailResponse].success(data=data)


@router.get(
    "/{lecture_id}/access",
    response_model=ApiResponse[LectureAccessResponse],
    summary="Lecture Access",
    description="Whether the lecture is unlocked for the caller.",
)
async def get_lecture_access(
        lecture_id: int,
        user: CurrentUser = Depends(AuthService.get_current_user),
        progress_service: ProgressService = Depends(get_progress_service),
) -> ApiResponse[LectureAccessResponse]:
    unlocked = await progress_service.check_access(user, lecture_id)
    return ApiResponse[LectureAccessResponse].success(
        data=LectureAccessResponse(lecture_id=lecture_id, unlocked=unlocked)
    )


@router.post(
    "/{lecture_id}/complete",
    response_model=ApiResponse[CompletionResponse],
    summary="Complete Reading",
)
async def complete_lecture(
        lecture_id: int,
        user: CurrentUser = Depends(AuthService.get_current_user),
        progress_service: ProgressService = Depends(get_progress_service),
) -> ApiResponse[CompletionResponse]:
    status = await progress_service.complete_reading(user, lecture_id)
    return ApiResponse[CompletionResponse].success(data=CompletionResponse(status=status))


@router.post(
    "/{lecture_id}/submit",
    response_model=ApiResponse[GradeResponse],
    summary="Submit Quiz",
    description="Grade answers server-side and record the result. Resubmission overwrites it.",
)
async def submit_quiz(
        lecture_id: int,
        request: SubmitQuizRequest,
        user: CurrentUser = Depends(AuthService.get_current_user),
        quiz_grader: QuizGrader = Depends(get_quiz_grader),
) -> ApiResponse[GradeResponse]:
    result = await quiz_grader.submit(user, lecture_id, request.answers)
    return ApiResponse[GradeResponse].success(
        data=GradeResponse(score=result.score, total=result.total, passed=result.passed)
    )
