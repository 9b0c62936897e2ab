"""
Quiz models (Question, Option)
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from learning_service.model.base import Base, BaseMixin


class Question(Base, BaseMixin):
    """
    Question of a quiz lecture.
    """
    __tablename__ = 'questions'

    lecture_id = Column(
        Integer,
        ForeignKey('lectures.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    text = Column(Text, nullable=False)

    # Relationships
    lecture = relationship("Lecture", back_populates="questions")
    options = relationship(
        "Option",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="Option.id",
        lazy="selectin"
    )

    def is_correct_option(self, option_id: int) -> bool:
        """True when option_id belongs to this question and is marked correct."""
        return any(
            option.id == option_id and option.is_correct for option in self.options
        )

    def __repr__(self):
        return f"<Question(id={self.id}, lecture_id={self.lecture_id})>"


class Option(Base, BaseMixin):
    """
    Answer option of a question.
    """
    __tablename__ = 'options'

    question_id = Column(
        Integer,
        ForeignKey('questions.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    text = Column(Text, nullable=False)
    is_correct = Column(Boolean, default=False, nullable=False)

    # Relationships
    question = relationship("Question", back_populates="options")

    def __repr__(self):
        return f"<Option(id={self.id}, is_correct={self.is_correct})>"
