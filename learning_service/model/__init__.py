"""
Model package - Database models and enums
"""
from learning_service.model.base import Base, BaseMixin, TimestampMixin
from learning_service.model.enums import (
    UserRole,
    LectureType,
    ProgressStatus,
    CompletionResult,
)
from learning_service.model.user_models import User
from learning_service.model.course_models import Course, Lecture
from learning_service.model.quiz_models import Question, Option
from learning_service.model.progress_models import ProgressRecord

__all__ = [
    # Base classes
    'Base',
    'BaseMixin',
    'TimestampMixin',
    # Enums
    'UserRole',
    'LectureType',
    'ProgressStatus',
    'CompletionResult',
    # Models
    'User',
    'Course',
    'Lecture',
    'Question',
    'Option',
    'ProgressRecord',
]
