"""
Quiz Repository - Data access layer for questions and options
"""
from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from learning_service.model.course_models import Lecture
from learning_service.model.quiz_models import Question, Option
from learning_service.repositories.base_repo import BaseRepository


class QuizRepository(BaseRepository[Question]):
    """
    Repository for the questions and options of quiz lectures.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(Question, session)

    async def get_questions_with_options(self, lecture_id: int) -> Sequence[Question]:
        """
        Get every question of a lecture with its options loaded.

        Args:
            lecture_id: ID of the quiz lecture

        Returns:
            Questions ordered by id
        """
        query = (
            select(Question)
            .options(selectinload(Question.options))
            .where(Question.lecture_id == lecture_id)
            .order_by(Question.id)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def add_questions_to_lecture(
        self,
        lecture: Lecture,
        questions_data: List[dict]
    ) -> List[Question]:
        """
        Stage questions and options for a lecture in the current transaction.

        Args:
            lecture: The quiz lecture (already added to the session)
            questions_data: List of question dicts with format:
                {
                    "text": str,
                    "options": [
                        {"text": str, "is_correct": bool},
                        ...
                    ]
                }

        Returns:
            The staged Question instances
        """
        questions = []
        for q_data in questions_data:
            question = Question(lecture_id=lecture.id, text=q_data["text"])
            for opt_data in q_data["options"]:
                question.options.append(
                    Option(text=opt_data["text"], is_correct=opt_data["is_correct"])
                )
            questions.append(question)

        self.session.add_all(questions)
        await self.session.flush()
        return questions
