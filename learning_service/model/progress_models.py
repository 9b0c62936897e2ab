"""
Per-user lecture progress
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)

from learning_service.model.base import Base, BaseMixin
from learning_service.model.enums import ProgressStatus, sql_in


class ProgressRecord(Base, BaseMixin):
    """
    Evidence that a user completed a lecture. One row per (user, lecture);
    quiz resubmissions overwrite score, total and passed in place.
    """

    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("user_id", "lecture_id", name="uq_progress_user_lecture"),
        CheckConstraint(f"status IN ({sql_in(ProgressStatus)})", name="ck_progress_status"),
        Index("idx_progress_user_course", "user_id", "course_id"),
    )

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    course_id = Column(
        Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False
    )
    lecture_id = Column(
        Integer, ForeignKey("lectures.id", ondelete="CASCADE"), nullable=False
    )
    status = Column(String(20), nullable=False)

    # Quiz only
    score = Column(Integer, nullable=True)
    total = Column(Integer, nullable=True)
    passed = Column(Boolean, nullable=True)

    def __repr__(self):
        return (
            f"<ProgressRecord(user_id={self.user_id}, lecture_id={self.lecture_id}, "
            f"status={self.status})>"
        )
