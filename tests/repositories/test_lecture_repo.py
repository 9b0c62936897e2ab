import pytest
from sqlalchemy.exc import IntegrityError

from learning_service.model.course_models import Course, Lecture
from learning_service.model.enums import LectureType, UserRole
from learning_service.repositories import LectureRepository, ProgressRepository


@pytest.fixture
async def course_id(session, make_user) -> int:
    owner = await make_user("owner@example.com", UserRole.INSTRUCTOR)
    course = Course(title="Course", description="Desc", instructor_id=owner.id)
    session.add(course)
    await session.commit()
    return course.id


async def test_next_order_index_of_empty_course_is_one(session, course_id):
    assert await LectureRepository(session).next_order_index(course_id) == 1


async def test_next_order_index_follows_the_maximum(session, course_id):
    repo = LectureRepository(session)
    await repo.add(Lecture(course_id=course_id, order_index=1, type=LectureType.READING.value, title="a"))
    await repo.add(Lecture(course_id=course_id, order_index=5, type=LectureType.READING.value, title="b"))

    assert await repo.next_order_index(course_id) == 6


async def test_duplicate_order_index_is_rejected_by_storage(session, course_id):
    repo = LectureRepository(session)
    await repo.add(Lecture(course_id=course_id, order_index=1, type=LectureType.READING.value, title="a"))

    with pytest.raises(IntegrityError):
        await repo.add(Lecture(course_id=course_id, order_index=1, type=LectureType.QUIZ.value, title="b"))


async def test_quiz_result_is_overwritten_in_place(session, course_id, make_user):
    student = await make_user("learner@example.com")
    lectures = LectureRepository(session)
    lecture = await lectures.add(
        Lecture(course_id=course_id, order_index=1, type=LectureType.QUIZ.value, title="q")
    )
    progress = ProgressRepository(session)

    first = await progress.save_quiz_result(student.id, course_id, lecture.id, 1, 3, False)
    second = await progress.save_quiz_result(student.id, course_id, lecture.id, 3, 3, True)
    await progress.commit()

    assert first.id == second.id
    assert await progress.count_by_filters({"user_id": student.id}) == 1
    record = await progress.get_record(student.id, lecture.id)
    assert (record.score, record.total, record.passed, record.status) == (3, 3, True, "passed_quiz")
