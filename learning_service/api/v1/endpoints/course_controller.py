import logging
from typing import List

from fastapi import APIRouter, Depends

from learning_service.dependencies.services import (
    get_course_service,
    get_lecture_service,
    get_progress_service,
)
from learning_service.model.enums import UserRole
from learning_service.schemas.auth import CurrentUser
from learning_service.schemas.course import (
    CourseDetailResponse,
    CourseResponse,
    CourseSummary,
    CreateCourseRequest,
)
from learning_service.schemas.generic import ApiResponse
from learning_service.schemas.lecture import CreateLectureRequest, LectureCreatedResponse
from learning_service.schemas.progress import (
    CompletedLecturesResponse,
    CourseProgressResponse,
)
from learning_service.services.auth_service import AuthService
from learning_service.services.course_service import CourseService
from learning_service.services.lecture_service import LectureService
from learning_service.services.progress_service import ProgressService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["Courses"])

require_instructor = AuthService.require_role(UserRole.INSTRUCTOR)


@router.post(
    "",
    response_model=ApiResponse[CourseResponse],
    status_code=201,
    summary="Create Course",
)
async def create_course(
        request: CreateCourseRequest,
        user: CurrentUser = Depends(require_instructor),
        course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    data = await course_service.create_course(user, request.title, request.description)
    return ApiResponse[CourseResponse].success(data=data, message="Course created")


@router.get(
    "",
    response_model=ApiResponse[List[CourseSummary]],
    summary="List Courses",
)
async def list_courses(
        course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[List[CourseSummary]]:
    return ApiResponse[List[CourseSummary]].success(data=await course_service.list_courses())


@router.get(
    "/{course_id}",
    response_model=ApiResponse[CourseDetailResponse],
    summary="Course Detail",
    description="Course with its lectures in order. Quiz answers are never included.",
)
async def get_course(
        course_id: int,
        course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseDetailResponse]:
    data = await course_service.get_course_detail(course_id)
    return ApiResponse[CourseDetailResponse].success(data=data)


@router.post(
    "/{course_id}/lectures",
    response_model=ApiResponse[LectureCreatedResponse],
    status_code=201,
    summary="Add Lecture",
    description="Append a reading or quiz lecture to a course owned by the caller.",
)
async def create_lecture(
        course_id: int,
        request: CreateLectureRequest,
        user: CurrentUser = Depends(require_instructor),
        lecture_service: LectureService = Depends(get_lecture_service),
) -> ApiResponse[LectureCreatedResponse]:
    data = await lecture_service.create_lecture(user, course_id, request)
    return ApiResponse[LectureCreatedResponse].success(data=data, message="Lecture created")


@router.get(
    "/{course_id}/progress",
    response_model=ApiResponse[CourseProgressResponse],
    summary="Course Progress",
)
async def get_course_progress(
        course_id: int,
        user: CurrentUser = Depends(AuthService.get_current_user),
        progress_service: ProgressService = Depends(get_progress_service),
) -> ApiResponse[CourseProgressResponse]:
    data = await progress_service.get_course_progress(user, course_id)
    return ApiResponse[CourseProgressResponse].success(data=data)


@router.get(
    "/{course_id}/progress/lectures",
    response_model=ApiResponse[CompletedLecturesResponse],
    summary="Completed Lectures",
)
async def get_completed_lectures(
        course_id: int,
        user: CurrentUser = Depends(AuthService.get_current_user),
        progress_service: ProgressService = Depends(get_progress_service),
) -> ApiResponse[CompletedLecturesResponse]:
    data = await progress_service.get_completed_lectures(user, course_id)
    return ApiResponse[CompletedLecturesResponse].success(data=data)
