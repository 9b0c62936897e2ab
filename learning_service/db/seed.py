"""
Demo data: one instructor, one student and a catalogue of short courses, each
with two readings followed by a three-question quiz.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from learning_service.model.course_models import Course, Lecture
from learning_service.model.enums import LectureType, UserRole
from learning_service.model.quiz_models import Option, Question
from learning_service.model.user_models import User
from learning_service.repositories.course_repo import CourseRepository
from learning_service.repositories.user_repo import UserRepository
from learning_service.services.auth_service import AuthService

logger = logging.getLogger(__name__)

MIN_COURSES = 20
DEMO_PASSWORD = "password"

TOPICS = [
    ("JavaScript Foundations", "Learn JavaScript fundamentals: runtime, variables, types, functions, and control flow."),
    ("HTML & CSS Essentials", "Build semantic HTML with responsive, modern CSS layouts."),
    ("Git & GitHub", "Version control basics: commits, branches, merges, and pull requests."),
    ("Linux Basics", "Filesystem, permissions, processes, and essential CLI commands."),
    ("Data Structures", "Arrays, maps, sets and trees; complexity and practical patterns."),
    ("Algorithms Basics", "Sorting, searching, recursion, and problem decomposition."),
    ("HTTP & REST", "Requests, responses, status codes, headers, and RESTful APIs."),
    ("Python Fundamentals", "Interpreter, modules, packaging, and building CLIs."),
    ("FastAPI Essentials", "Routing, dependencies, error handling, and APIs."),
    ("SQL Basics", "Relational modeling, SELECT/INSERT/UPDATE/DELETE, joins."),
    ("SQLite Practical", "File-based DB, schema design, indexes, transactions."),
    ("NoSQL Basics", "Documents vs key-value, modeling trade-offs, eventual consistency."),
    ("Type Hints", "Annotations, generics, protocols, and incremental adoption."),
    ("Web Accessibility", "ARIA, semantics, focus management, keyboard navigation."),
    ("Testing Fundamentals", "Unit, integration, E2E testing and test pyramids."),
    ("Security Basics", "OWASP Top 10, input validation, auth, and secrets handling."),
    ("Cloud Basics", "Compute, storage, networking, and shared responsibility model."),
    ("Docker Basics", "Images, containers, volumes, and Dockerfiles."),
    ("CI/CD Essentials", "Build pipelines, tests, artifact storage, and deployments."),
    ("System Design Intro", "Scalability, reliability, load balancers, and caching."),
]


def _quiz_questions(title: str) -> list[Question]:
    # (question text, options, index of the correct option)
    blueprint = [
        (
            f"Which statement about {title} is true?",
            [
                "It solves every problem perfectly",
                "It has trade-offs that must be understood",
                "It eliminates the need for design",
                "It is always the wrong choice",
            ],
            1,
        ),
        (
            f"In practice, {title} requires:",
            [
                "Memorizing without context",
                "Applying concepts to real problems",
                "Ignoring performance and users",
                "Copying code blindly",
            ],
            1,
        ),
        (
            f"A key best practice in {title} is:",
            [
                "Avoid testing or validation",
                "Use clear structure and iterate",
                "Never document anything",
                "Prefer magic over clarity",
            ],
            1,
        ),
    ]
    return [
        Question(
            text=text,
            options=[
                Option(text=option, is_correct=i == correct)
                for i, option in enumerate(options)
            ],
        )
        for text, options, correct in blueprint
    ]


def build_demo_course(title: str, description: str, instructor_id: int) -> Course:
    return Course(
        title=title,
        description=description,
        instructor_id=instructor_id,
        lectures=[
            Lecture(
                order_index=1,
                type=LectureType.READING.value,
                title=f"{title}: Overview",
                content=(
                    f"<p>{description}</p><ul><li>Concepts and terminology</li>"
                    "<li>Use-cases and best practices</li><li>Common pitfalls</li></ul>"
                ),
            ),
            Lecture(
                order_index=2,
                type=LectureType.READING.value,
                title=f"{title}: Core Techniques",
                content=(
                    "<p>Hands-on techniques and patterns:</p><ol><li>Setup and tooling</li>"
                    "<li>Core APIs/features</li><li>Performance tips</li></ol>"
                ),
            ),
            Lecture(
                order_index=3,
                type=LectureType.QUIZ.value,
                title=f"{title}: Quick Check",
                questions=_quiz_questions(title),
            ),
        ],
    )


async def _ensure_user(users: UserRepository, email: str, role: UserRole) -> User:
    user = await users.get_first_by_role(role.value)
    if user:
        return user
    return await users.add(
        User(
            email=email,
            password_hash=AuthService.hash_password(DEMO_PASSWORD),
            role=role.value,
        )
    )


async def seed_if_empty(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """
    Top the catalogue up with demo courses when fewer than MIN_COURSES exist.

    Returns:
        Number of courses created
    """
    async with session_factory() as session:
        courses = CourseRepository(session)
        users = UserRepository(session)

        if await courses.count() >= MIN_COURSES:
            logger.info("Seed: sufficient courses already exist")
            return 0

        instructor = await _ensure_user(users, "instructor@example.com", UserRole.INSTRUCTOR)
        await _ensure_user(users, "student@example.com", UserRole.STUDENT)

        for title, description in TOPICS:
            session.add(build_demo_course(title, description, instructor.id))

        await session.commit()

    logger.info(f"Seeded {len(TOPICS)} courses with readings and quizzes")
    return len(TOPICS)
