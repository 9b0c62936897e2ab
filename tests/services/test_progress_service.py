import pytest

from learning_service.model.course_models import Course
from learning_service.model.enums import (
    CompletionResult,
    LectureType,
    ProgressStatus,
    UserRole,
)
from learning_service.repositories import (
    CourseRepository,
    LectureRepository,
    ProgressRepository,
    QuizRepository,
)
from learning_service.schemas.lecture import CreateLectureRequest
from learning_service.services.lecture_service import LectureService
from learning_service.services.progress_service import (
    ProgressService,
    completion_ratio,
    is_lecture_unlocked,
)
from learning_service.services.quiz_grader import QuizGrader
from learning_service.utils.exceptions import (
    AccessDeniedException,
    BadRequestException,
    ResourceNotFoundException,
)


def test_first_lecture_is_always_unlocked():
    assert is_lecture_unlocked([10, 20, 30], set(), 10)


def test_lecture_unlocks_after_its_predecessor():
    assert not is_lecture_unlocked([10, 20, 30], set(), 20)
    assert is_lecture_unlocked([10, 20, 30], {10}, 20)


def test_only_the_immediate_predecessor_counts():
    assert not is_lecture_unlocked([10, 20, 30], {10}, 30)
    assert is_lecture_unlocked([10, 20, 30], {20}, 30)


def test_completion_ratio_handles_empty_course():
    assert completion_ratio(0, 0) == 0
    assert completion_ratio(1, 4) == 0.25


@pytest.fixture
async def setup(session, make_user):
    """Instructor-owned course with readings L0, L1 and a three-question quiz L2."""
    instructor = await make_user("author@example.com", UserRole.INSTRUCTOR)
    student = await make_user("learner@example.com")

    course = Course(title="Course", description="Desc", instructor_id=instructor.id)
    session.add(course)
    await session.commit()

    courses = CourseRepository(session)
    lectures = LectureRepository(session)
    quizzes = QuizRepository(session)
    progress = ProgressRepository(session)
    lecture_service = LectureService(courses, lectures, quizzes)
    progress_service = ProgressService(courses, lectures, progress)
    grader = QuizGrader(progress_service, quizzes, progress)

    l0 = await lecture_service.create_lecture(
        instructor, course.id, CreateLectureRequest(type=LectureType.READING, title="L0", content="a")
    )
    l1 = await lecture_service.create_lecture(
        instructor, course.id, CreateLectureRequest(type=LectureType.READING, title="L1", content="b")
    )
    l2 = await lecture_service.create_lecture(
        instructor,
        course.id,
        CreateLectureRequest(
            type=LectureType.QUIZ,
            title="L2",
            questions=[
                {
                    "text": f"Q{n}",
                    "options": [
                        {"text": "right", "is_correct": True},
                        {"text": "wrong", "is_correct": False},
                    ],
                }
                for n in range(3)
            ],
        ),
    )
    return {
        "student": student,
        "course_id": course.id,
        "lectures": [l0, l1, l2],
        "progress_service": progress_service,
        "grader": grader,
        "quizzes": quizzes,
    }


async def test_unlock_follows_completion_order(setup):
    student = setup["student"]
    service = setup["progress_service"]
    l0, l1, l2 = setup["lectures"]

    assert await service.check_access(student, l0.id)
    assert not await service.check_access(student, l1.id)
    assert not await service.check_access(student, l2.id)

    await service.complete_reading(student, l0.id)
    assert await service.check_access(student, l1.id)
    assert not await service.check_access(student, l2.id)

    await service.complete_reading(student, l1.id)
    assert await service.check_access(student, l2.id)


async def test_completing_a_locked_reading_is_denied(setup):
    with pytest.raises(AccessDeniedException):
        await setup["progress_service"].complete_reading(setup["student"], setup["lectures"][1].id)


async def test_complete_reading_is_idempotent(setup):
    student = setup["student"]
    service = setup["progress_service"]
    l0 = setup["lectures"][0]

    assert await service.complete_reading(student, l0.id) == CompletionResult.COMPLETED
    assert await service.complete_reading(student, l0.id) == CompletionResult.ALREADY_COMPLETED

    progress = await service.get_course_progress(student, setup["course_id"])
    assert progress.completed == 1


async def test_complete_rejects_quiz_lecture(setup):
    with pytest.raises(BadRequestException):
        await setup["progress_service"].complete_reading(setup["student"], setup["lectures"][2].id)


async def test_complete_unknown_lecture(setup):
    with pytest.raises(ResourceNotFoundException):
        await setup["progress_service"].complete_reading(setup["student"], 9999)


async def test_failed_quiz_still_completes_the_course(setup):
    student = setup["student"]
    service = setup["progress_service"]
    l0, l1, l2 = setup["lectures"]
    course_id = setup["course_id"]

    await service.complete_reading(student, l0.id)
    assert (await service.get_course_progress(student, course_id)).ratio == pytest.approx(1 / 3)

    await service.complete_reading(student, l1.id)
    assert (await service.get_course_progress(student, course_id)).ratio == pytest.approx(2 / 3)

    questions = await setup["quizzes"].get_questions_with_options(l2.id)
    answers = {str(q.id): q.options[0].id for q in questions[:2]}
    answers[str(questions[2].id)] = questions[2].options[1].id

    result = await setup["grader"].submit(student, l2.id, answers)
    assert (result.score, result.total, result.passed) == (2, 3, False)

    progress = await service.get_course_progress(student, course_id)
    assert (progress.completed, progress.total, progress.ratio) == (3, 3, 1.0)

    completed = await service.get_completed_lectures(student, course_id)
    assert completed.completed_lecture_ids == [l0.id, l1.id, l2.id]


async def test_progress_for_unknown_course(setup):
    with pytest.raises(ResourceNotFoundException):
        await setup["progress_service"].get_course_progress(setup["student"], 9999)


class LateProgressRepository(ProgressRepository):
    """Misses one existence check, as if a concurrent request won the insert."""

    def __init__(self, session, late_check: str):
        super().__init__(session)
        self.late_check = late_check

    def _miss(self, check: str) -> bool:
        if self.late_check == check:
            self.late_check = None
            return True
        return False

    async def has_completed(self, user_id, lecture_id):
        if self._miss("has_completed"):
            return False
        return await super().has_completed(user_id, lecture_id)

    async def get_record(self, user_id, lecture_id):
        if self._miss("get_record"):
            return None
        return await super().get_record(user_id, lecture_id)


def late_services(session, late_check: str):
    courses = CourseRepository(session)
    lectures = LectureRepository(session)
    progress = LateProgressRepository(session, late_check)
    progress_service = ProgressService(courses, lectures, progress)
    return progress_service, QuizGrader(progress_service, QuizRepository(session), progress)


async def test_duplicate_reading_insert_reports_already_completed(setup, session):
    student = setup["student"]
    l0 = setup["lectures"][0]
    await setup["progress_service"].complete_reading(student, l0.id)

    late_service, _ = late_services(session, "has_completed")
    assert await late_service.complete_reading(student, l0.id) == CompletionResult.ALREADY_COMPLETED

    progress = await setup["progress_service"].get_course_progress(student, setup["course_id"])
    assert progress.completed == 1


async def test_duplicate_quiz_insert_overwrites_the_existing_record(setup, session):
    student = setup["student"]
    service = setup["progress_service"]
    l0, l1, l2 = setup["lectures"]
    await service.complete_reading(student, l0.id)
    await service.complete_reading(student, l1.id)

    first = await setup["grader"].submit(student, l2.id, {})
    assert (first.score, first.total, first.passed) == (0, 3, False)

    questions = await setup["quizzes"].get_questions_with_options(l2.id)
    answers = {str(q.id): q.options[0].id for q in questions}

    _, late_grader = late_services(session, "get_record")
    result = await late_grader.submit(student, l2.id, answers)
    assert (result.score, result.total, result.passed) == (3, 3, True)

    record = await ProgressRepository(session).get_record(student.id, l2.id)
    assert (record.score, record.total, record.passed) == (3, 3, True)
    assert record.status == ProgressStatus.PASSED_QUIZ.value
    assert (await service.get_course_progress(student, setup["course_id"])).completed == 3
