"""
Repository package - Data access layer
"""

from learning_service.repositories.base_repo import BaseRepository
from learning_service.repositories.user_repo import UserRepository
from learning_service.repositories.course_repo import CourseRepository
from learning_service.repositories.lecture_repo import LectureRepository
from learning_service.repositories.quiz_repo import QuizRepository
from learning_service.repositories.progress_repo import ProgressRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CourseRepository",
    "LectureRepository",
    "QuizRepository",
    "ProgressRepository",
]
