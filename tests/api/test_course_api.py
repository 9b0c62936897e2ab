from ..test_utils.api import (
    API,
    add_quiz,
    add_reading,
    auth_header,
    create_course,
    quiz_payload,
    register,
)


async def test_students_cannot_create_courses(client):
    token = await register(client, "student@example.com", "student")

    response = await client.post(
        f"{API}/courses",
        json={"title": "T", "description": "D"},
        headers=auth_header(token),
    )

    assert response.status_code == 403


async def test_create_course_requires_fields(client):
    token = await register(client, "author@example.com", "instructor")

    response = await client.post(
        f"{API}/courses", json={"title": "Only a title"}, headers=auth_header(token)
    )

    assert response.status_code == 400
    assert "description" in response.json()["message"]


async def test_create_course(client):
    token = await register(client, "author@example.com", "instructor")

    response = await client.post(
        f"{API}/courses",
        json={"title": "Python 101", "description": "Basics"},
        headers=auth_header(token),
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["title"] == "Python 101"
    assert data["description"] == "Basics"
    assert isinstance(data["id"], int)


async def test_list_courses_includes_counts_and_instructor(client):
    token = await register(client, "author@example.com", "instructor")
    first = await create_course(client, token, "First")
    second = await create_course(client, token, "Second")
    await add_reading(client, token, first, "Intro")
    await add_quiz(client, token, first)

    response = await client.get(f"{API}/courses")

    assert response.status_code == 200
    courses = {course["id"]: course for course in response.json()["data"]}
    assert courses[first]["lectures"] == 2
    assert courses[second]["lectures"] == 0
    assert courses[first]["instructor_email"] == "author@example.com"
    assert [course["id"] for course in response.json()["data"]] == [second, first]


async def test_course_detail_lists_lectures_in_order(client):
    token = await register(client, "author@example.com", "instructor")
    course_id = await create_course(client, token)
    await add_reading(client, token, course_id, "One")
    await add_quiz(client, token, course_id)
    await add_reading(client, token, course_id, "Three")

    response = await client.get(f"{API}/courses/{course_id}")

    assert response.status_code == 200
    lectures = response.json()["data"]["lectures"]
    assert [lec["order_index"] for lec in lectures] == [1, 2, 3]
    assert [lec["type"] for lec in lectures] == ["reading", "quiz", "reading"]
    assert "questions" not in lectures[1]
    assert "is_correct" not in response.text


async def test_course_detail_not_found(client):
    response = await client.get(f"{API}/courses/424242")

    assert response.status_code == 404


async def test_create_lecture_returns_order_index(client):
    token = await register(client, "author@example.com", "instructor")
    course_id = await create_course(client, token)

    first = await add_reading(client, token, course_id, "One")
    second = await add_quiz(client, token, course_id)

    assert first == {
        "id": first["id"],
        "course_id": course_id,
        "order_index": 1,
        "type": "reading",
        "title": "One",
    }
    assert second["order_index"] == 2
    assert second["type"] == "quiz"


async def test_create_lecture_on_someone_elses_course(client):
    owner = await register(client, "owner@example.com", "instructor")
    intruder = await register(client, "intruder@example.com", "instructor")
    course_id = await create_course(client, owner)

    response = await client.post(
        f"{API}/courses/{course_id}/lectures",
        json={"type": "reading", "title": "Hijack"},
        headers=auth_header(intruder),
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Not your course"


async def test_create_lecture_on_missing_course(client):
    token = await register(client, "author@example.com", "instructor")

    response = await client.post(
        f"{API}/courses/9999/lectures",
        json={"type": "reading", "title": "Lost"},
        headers=auth_header(token),
    )

    assert response.status_code == 404


async def test_invalid_quiz_is_rejected_without_side_effects(client):
    token = await register(client, "author@example.com", "instructor")
    course_id = await create_course(client, token)
    payload = quiz_payload()
    for option in payload["questions"][2]["options"]:
        option["is_correct"] = False

    response = await client.post(
        f"{API}/courses/{course_id}/lectures", json=payload, headers=auth_header(token)
    )

    assert response.status_code == 400
    detail = await client.get(f"{API}/courses/{course_id}")
    assert detail.json()["data"]["lectures"] == []

    # The rejected payload did not consume an order index
    created = await add_reading(client, token, course_id, "After")
    assert created["order_index"] == 1


async def test_quiz_option_flags_must_be_booleans(client):
    token = await register(client, "author@example.com", "instructor")
    course_id = await create_course(client, token)
    payload = quiz_payload()
    payload["questions"][0]["options"][0]["is_correct"] = "yes"

    response = await client.post(
        f"{API}/courses/{course_id}/lectures", json=payload, headers=auth_header(token)
    )

    assert response.status_code == 400


async def test_lecture_type_must_be_known(client):
    token = await register(client, "author@example.com", "instructor")
    course_id = await create_course(client, token)

    response = await client.post(
        f"{API}/courses/{course_id}/lectures",
        json={"type": "video", "title": "Nope"},
        headers=auth_header(token),
    )

    assert response.status_code == 400
