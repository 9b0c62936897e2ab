"""
Enums shared by models, schemas and services
"""
from enum import Enum


class UserRole(str, Enum):
    """Role fixed at registration"""
    INSTRUCTOR = "instructor"
    STUDENT = "student"


class LectureType(str, Enum):
    """Type of lecture content"""
    READING = "reading"
    QUIZ = "quiz"


class ProgressStatus(str, Enum):
    """Status stored on a progress record"""
    COMPLETED = "completed"
    PASSED_QUIZ = "passed_quiz"


class CompletionResult(str, Enum):
    """Outcome of marking a reading lecture complete"""
    COMPLETED = "completed"
    ALREADY_COMPLETED = "already_completed"


def sql_in(enum_cls) -> str:
    """Render enum values for a CHECK ... IN (...) constraint."""
    return ",".join(f"'{member.value}'" for member in enum_cls)
