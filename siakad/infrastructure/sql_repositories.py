"""SQL Repositories — SQLAlchemy implementations of the student and course Protocols.

Invariants:
    - Every call opens one session and commits before returning (single-operation atomicity)
    - ORM rows never escape: callers receive frozen core records
    - Lookups return None for missing rows; update() of a missing row raises the not-found error
    - Course update() is a compare-and-set on the row version: a record read before another
      writer committed raises ConcurrentUpdateError and changes nothing
    - is_prerequisite_met: every prerequisite of the course is among the student's completed
      courses; a course with no prerequisites is always met, an unknown course never is

Design Decisions:
    - Session per call via DatabaseSessionManager: the enrollment service is a process-wide
      singleton and must not hold a session between requests
    - Prerequisites fetched with one IN query per lookup instead of ORM relationships:
      keeps the self-referencing link table out of the mapper configuration
"""

import logging
from collections import defaultdict
from collections.abc import Iterable

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from siakad.core.domain_types import AcademicStatus, CourseCode, StudentId
from siakad.core.errors import (
    ConcurrentUpdateError, CourseNotFoundError, StudentNotFoundError,
)
from siakad.core.records import Course, Student
from siakad.infrastructure.database import DatabaseSessionManager
from siakad.models.course import CourseModel, CoursePrerequisiteModel
from siakad.models.student import CompletedCourseModel, StudentModel

logger = logging.getLogger(__name__)


# ─── Row <-> Record ──────────────────────────────────────────────

def _to_student(row: StudentModel) -> Student:
    return Student(
        student_id=StudentId(row.student_id),
        name=row.name,
        email=row.email,
        major=row.major,
        semester=row.semester,
        gpa=row.gpa,
        academic_status=AcademicStatus(row.academic_status),
        phone=row.phone,
    )


def _to_course(row: CourseModel, prerequisites: Iterable[str]) -> Course:
    return Course(
        course_code=CourseCode(row.course_code),
        course_name=row.course_name,
        capacity=row.capacity,
        enrolled_count=row.enrolled_count,
        credits=row.credits,
        prerequisites=tuple(sorted(CourseCode(p) for p in prerequisites)),
        version=row.version,
    )


async def _load_prerequisites(
    db: AsyncSession, course_codes: Iterable[str],
) -> dict[str, list[str]]:
    codes = list(course_codes)
    if not codes:
        return {}
    result = await db.execute(
        select(CoursePrerequisiteModel)
        .where(CoursePrerequisiteModel.course_code.in_(codes)),
    )
    by_course: dict[str, list[str]] = defaultdict(list)
    for link in result.scalars().all():
        by_course[link.course_code].append(link.prerequisite_code)
    return by_course


# ─── Students ────────────────────────────────────────────────────

class SqlStudentRepository:
    """StudentRepository over the students / student_completed_courses tables."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def find_by_id(self, student_id: StudentId) -> Student | None:
        async with self.db_manager.session() as db:
            row = await db.get(StudentModel, student_id)
            return _to_student(row) if row else None

    async def save(self, student: Student) -> None:
        async with self.db_manager.session() as db:
            db.add(StudentModel(
                student_id=student.student_id,
                name=student.name,
                email=student.email,
                phone=student.phone,
                major=student.major,
                semester=student.semester,
                gpa=student.gpa,
                academic_status=student.academic_status.value,
            ))
            await db.commit()
        logger.info("Student saved", extra={"student_id": student.student_id})

    async def update(self, student: Student) -> None:
        async with self.db_manager.session() as db:
            row = await db.get(StudentModel, student.student_id)
            if row is None:
                raise StudentNotFoundError(student.student_id)
            row.name = student.name
            row.email = student.email
            row.phone = student.phone
            row.major = student.major
            row.semester = student.semester
            row.gpa = student.gpa
            row.academic_status = student.academic_status.value
            await db.commit()

    async def get_completed_courses(self, student_id: StudentId) -> list[Course]:
        async with self.db_manager.session() as db:
            result = await db.execute(
                select(CourseModel)
                .join(
                    CompletedCourseModel,
                    CompletedCourseModel.course_code == CourseModel.course_code,
                )
                .where(CompletedCourseModel.student_id == student_id)
                .order_by(CourseModel.course_code),
            )
            rows = result.scalars().all()
            prerequisites = await _load_prerequisites(
                db, (r.course_code for r in rows),
            )
            return [_to_course(r, prerequisites.get(r.course_code, ())) for r in rows]

    async def record_completed_course(
        self, student_id: StudentId, course_code: CourseCode,
    ) -> None:
        """Mark a course as passed by the student (registrar import path)."""
        async with self.db_manager.session() as db:
            if await db.get(StudentModel, student_id) is None:
                raise StudentNotFoundError(student_id)
            if await db.get(CourseModel, course_code) is None:
                raise CourseNotFoundError(course_code)
            existing = await db.get(CompletedCourseModel, (student_id, course_code))
            if existing is None:
                db.add(CompletedCourseModel(
                    student_id=student_id, course_code=course_code,
                ))
                await db.commit()

    async def delete(self, student_id: StudentId) -> None:
        async with self.db_manager.session() as db:
            await db.execute(
                delete(CompletedCourseModel)
                .where(CompletedCourseModel.student_id == student_id),
            )
            await db.execute(
                delete(StudentModel).where(StudentModel.student_id == student_id),
            )
            await db.commit()
        logger.info("Student deleted", extra={"student_id": student_id})


# ─── Courses ─────────────────────────────────────────────────────

class SqlCourseRepository:
    """CourseRepository over the courses / course_prerequisites tables."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def find_by_course_code(self, course_code: CourseCode) -> Course | None:
        async with self.db_manager.session() as db:
            row = await db.get(CourseModel, course_code)
            if row is None:
                return None
            prerequisites = await _load_prerequisites(db, [course_code])
            return _to_course(row, prerequisites.get(course_code, ()))

    async def save(self, course: Course) -> None:
        async with self.db_manager.session() as db:
            db.add(CourseModel(
                course_code=course.course_code,
                course_name=course.course_name,
                capacity=course.capacity,
                enrolled_count=course.enrolled_count,
                credits=course.credits,
            ))
            await db.flush()
            for prerequisite in course.prerequisites:
                db.add(CoursePrerequisiteModel(
                    course_code=course.course_code,
                    prerequisite_code=prerequisite,
                ))
            await db.commit()
        logger.info("Course saved", extra={"course_code": course.course_code})

    async def update(self, course: Course) -> None:
        async with self.db_manager.session() as db:
            result = await db.execute(
                update(CourseModel)
                .where(
                    CourseModel.course_code == course.course_code,
                    CourseModel.version == course.version,
                )
                .values(
                    course_name=course.course_name,
                    capacity=course.capacity,
                    enrolled_count=course.enrolled_count,
                    credits=course.credits,
                    version=CourseModel.version + 1,
                )
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:
                if await db.get(CourseModel, course.course_code) is None:
                    raise CourseNotFoundError(course.course_code)
                raise ConcurrentUpdateError(course.course_code, course.version)

            current = set(
                (await _load_prerequisites(db, [course.course_code]))
                .get(course.course_code, ()),
            )
            wanted = set(course.prerequisites)
            if current != wanted:
                await db.execute(
                    delete(CoursePrerequisiteModel)
                    .where(CoursePrerequisiteModel.course_code == course.course_code),
                )
                for prerequisite in sorted(wanted):
                    db.add(CoursePrerequisiteModel(
                        course_code=course.course_code,
                        prerequisite_code=prerequisite,
                    ))
            await db.commit()

    async def is_prerequisite_met(
        self, student_id: StudentId, course_code: CourseCode,
    ) -> bool:
        async with self.db_manager.session() as db:
            if await db.get(CourseModel, course_code) is None:
                return False
            required = set(
                (await _load_prerequisites(db, [course_code])).get(course_code, ()),
            )
            if not required:
                return True
            result = await db.execute(
                select(CompletedCourseModel.course_code)
                .where(CompletedCourseModel.student_id == student_id),
            )
            completed = set(result.scalars().all())
            return required <= completed
