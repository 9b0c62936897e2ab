from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from learning_service.model.enums import CompletionResult, LectureType


# =============================
#   Request Schemas
# =============================
class OptionInput(BaseModel):
    """Answer option as authored by an instructor"""

    text: str = Field(..., description="Option text")
    is_correct: StrictBool = Field(..., description="Whether this option is correct")


class QuestionInput(BaseModel):
    """Quiz question as authored by an instructor"""

    text: str = Field(..., description="Question text")
    options: List[OptionInput] = Field(..., description="At least two options")


class CreateLectureRequest(BaseModel):
    """Request schema for adding a lecture to a course"""

    type: LectureType = Field(..., description="reading or quiz")
    title: str = Field(..., min_length=1, description="Lecture title")
    content: Optional[str] = Field(
        None, description="Reading content: text, HTML or a URL"
    )
    questions: Optional[List[QuestionInput]] = Field(
        None, description="Quiz questions; required when type is quiz"
    )


class SubmitQuizRequest(BaseModel):
    """Answers keyed by question id; values are the selected option ids"""

    answers: Dict[str, Any] = Field(..., description="question_id -> option_id")


# =============================
#   Response Schemas
# =============================
class LectureCreatedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    order_index: int
    type: LectureType
    title: str


class OptionView(BaseModel):
    """Option shown to learners; correctness is never exposed"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str


class QuestionView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    options: List[OptionView]


class LectureDetailResponse(BaseModel):
    id: int
    course_id: int
    order_index: int
    type: LectureType
    title: str
    content: Optional[str] = None
    questions: Optional[List[QuestionView]] = None


class LectureAccessResponse(BaseModel):
    lecture_id: int
    unlocked: bool


class CompletionResponse(BaseModel):
    status: CompletionResult


class GradeResponse(BaseModel):
    score: int
    total: int
    passed: bool
