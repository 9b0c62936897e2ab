"""
Course and lecture models
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from learning_service.model.base import Base, BaseMixin
from learning_service.model.enums import LectureType, sql_in


class Course(Base, BaseMixin):
    """
    Course owned by exactly one instructor.
    """

    __tablename__ = "courses"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    instructor_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    instructor = relationship("User", back_populates="courses")
    lectures = relationship(
        "Lecture",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="Lecture.order_index",
    )

    def __repr__(self):
        return f"<Course(id={self.id}, title={self.title})>"


class Lecture(Base, BaseMixin):
    """
    Ordered unit of a course. order_index is 1-based and unique per course.
    """

    __tablename__ = "lectures"
    __table_args__ = (
        UniqueConstraint("course_id", "order_index", name="uq_lectures_course_order"),
        CheckConstraint(f"type IN ({sql_in(LectureType)})", name="ck_lectures_type"),
    )

    course_id = Column(
        Integer,
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    order_index = Column(Integer, nullable=False)
    type = Column(String(20), nullable=False)
    title = Column(String(255), nullable=False)
    # Reading content: plain text, HTML or a URL
    content = Column(Text, nullable=True)

    # Relationships
    course = relationship("Course", back_populates="lectures")
    questions = relationship(
        "Question",
        back_populates="lecture",
        cascade="all, delete-orphan",
        order_by="Question.id",
    )

    def __repr__(self):
        return f"<Lecture(id={self.id}, order_index={self.order_index}, type={self.type})>"
