from typing import List

from pydantic import BaseModel, Field


class CourseProgressResponse(BaseModel):
    """Share of a course's lectures completed by the caller"""

    completed: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    ratio: float = Field(..., ge=0, le=1)


class CompletedLecturesResponse(BaseModel):
    """Lecture ids completed by the caller, used for unlock computation"""

    completed_lecture_ids: List[int]
