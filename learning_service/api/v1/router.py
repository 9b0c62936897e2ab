from fastapi import APIRouter

from learning_service.api.v1.endpoints import (
    auth_controller,
    course_controller,
    lecture_controller,
)

api_router = APIRouter()

api_router.include_router(auth_controller.router)
api_router.include_router(course_controller.router)
api_router.include_router(lecture_controller.router)
