"""Infrastructure fixtures — in-memory SQLite schema and seeded SQL repositories."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import siakad.models  # noqa: F401 — registers tables on Base.metadata
from siakad.core.domain_types import AcademicStatus, CourseCode, StudentId
from siakad.core.records import Course, Student
from siakad.db.base import Base
from siakad.infrastructure.database import DatabaseSessionManager
from siakad.infrastructure.sql_repositories import (
    SqlCourseRepository, SqlStudentRepository,
)


@pytest.fixture
async def db_manager():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    manager = DatabaseSessionManager.from_engine(engine)
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_students(db_manager):
    return SqlStudentRepository(db_manager)


@pytest.fixture
def sql_courses(db_manager):
    return SqlCourseRepository(db_manager)


@pytest.fixture
async def seeded(sql_students, sql_courses):
    """Two students, a full course, an open course and one with a prerequisite."""
    await sql_students.save(Student(
        StudentId("S001"), "Park Sungho", email="s001@university.ac.id",
        major="Informatika", semester=5, gpa=3.4,
    ))
    await sql_students.save(Student(
        StudentId("S005"), "Kim Dohyun", email="s005@university.ac.id",
        major="Informatika", semester=5, gpa=1.2,
        academic_status=AcademicStatus.SUSPENDED,
    ))
    await sql_courses.save(Course(CourseCode("CS101"), "Algoritma", 40, 10, 3))
    await sql_courses.save(Course(CourseCode("CS102"), "Struktur Data", 30, 30, 3))
    await sql_courses.save(Course(
        CourseCode("CS201"), "Basis Data", 35, 0, 3,
        prerequisites=(CourseCode("CS101"),),
    ))
    return sql_students, sql_courses
