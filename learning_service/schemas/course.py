from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from learning_service.model.enums import LectureType


# =============================
#   Request Schemas
# =============================
class CreateCourseRequest(BaseModel):
    """Request schema for creating a course"""

    title: str = Field(..., min_length=1, description="Course title")
    description: str = Field(..., min_length=1, description="Course description")


# =============================
#   Response Schemas
# =============================
class CourseResponse(BaseModel):
    """Course as returned right after creation"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str


class CourseSummary(BaseModel):
    """Course list entry with aggregate data"""

    id: int
    title: str
    description: str
    created_at: datetime
    instructor_email: str
    lectures: int = Field(..., description="Number of lectures in the course")


class CourseLectureItem(BaseModel):
    """Lecture entry of a course outline; carries no quiz answer data"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    order_index: int
    type: LectureType
    title: str
    content: Optional[str] = None


class CourseDetailResponse(BaseModel):
    """Course with its ordered lectures"""

    id: int
    title: str
    description: str
    instructor_id: int
    created_at: datetime
    lectures: List[CourseLectureItem]
