"""Service test fixtures — in-memory collaborators for EnrollmentService.

Invariants:
    - Fakes satisfy the core Protocols structurally (no inheritance)
    - Every fake records its calls so tests can assert "no mutation happened"
    - Fake IO yields to the event loop (asyncio.sleep(0)) so concurrent tests interleave

Design Decisions:
    - Student/GPA table + builders instead of per-test stub classes
    - Course store holds frozen records; update() replaces the stored record
"""

import asyncio

import pytest

from siakad.core.domain_types import AcademicStatus, CourseCode, StudentId
from siakad.core.errors import NotificationError
from siakad.core.grade_calculator import GradeCalculator
from siakad.core.records import Course, Student
from siakad.services.enrollment_service import EnrollmentService


# (student_id, name, gpa, status)
STUDENT_TABLE = [
    ("S001", "Park Sungho", 3.8, AcademicStatus.ACTIVE),       # max 24
    ("S002", "Lee Sanghyeok", 2.6, AcademicStatus.ACTIVE),     # max 21
    ("S003", "Myung Jaehyun", 2.3, AcademicStatus.PROBATION),  # max 18
    ("S004", "Han Taesan", 1.9, AcademicStatus.PROBATION),     # max 15
    ("S005", "Kim Dohyun", 1.2, AcademicStatus.SUSPENDED),
]


def make_student(
    student_id: str,
    name: str = "Test Student",
    gpa: float = 3.0,
    status: AcademicStatus = AcademicStatus.ACTIVE,
    email: str | None = None,
    semester: int = 3,
) -> Student:
    return Student(
        student_id=StudentId(student_id),
        name=name,
        email=email if email is not None else f"{student_id.lower()}@university.ac.id",
        major="Informatika",
        semester=semester,
        gpa=gpa,
        academic_status=status,
    )


def make_course(
    course_code: str,
    course_name: str = "Test Course",
    capacity: int = 40,
    enrolled_count: int = 0,
    prerequisites: tuple[str, ...] = (),
) -> Course:
    return Course(
        course_code=CourseCode(course_code),
        course_name=course_name,
        capacity=capacity,
        enrolled_count=enrolled_count,
        credits=3,
        prerequisites=tuple(CourseCode(p) for p in prerequisites),
    )


class FakeStudentRepository:
    def __init__(self, students=()):
        self.students = {s.student_id: s for s in students}
        self.lookups: list[str] = []
        self.completed: dict[str, list[Course]] = {}

    async def find_by_id(self, student_id):
        self.lookups.append(student_id)
        await asyncio.sleep(0)
        return self.students.get(student_id)

    async def save(self, student):
        self.students[student.student_id] = student

    async def update(self, student):
        self.students[student.student_id] = student

    async def get_completed_courses(self, student_id):
        return list(self.completed.get(student_id, []))

    async def delete(self, student_id):
        self.students.pop(student_id, None)


class FakeCourseRepository:
    def __init__(self, courses=()):
        self.courses = {c.course_code: c for c in courses}
        self.unmet: set[tuple[str, str]] = set()
        self.updates: list[Course] = []
        self.lookups: list[str] = []
        self.prerequisite_checks: list[tuple[str, str]] = []

    async def find_by_course_code(self, course_code):
        self.lookups.append(course_code)
        await asyncio.sleep(0)
        return self.courses.get(course_code)

    async def save(self, course):
        self.courses[course.course_code] = course

    async def update(self, course):
        await asyncio.sleep(0)
        self.updates.append(course)
        self.courses[course.course_code] = course

    async def is_prerequisite_met(self, student_id, course_code):
        self.prerequisite_checks.append((student_id, course_code))
        await asyncio.sleep(0)
        return (student_id, course_code) not in self.unmet


class FakeNotificationService:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.emails: list[tuple[str | None, str, str]] = []
        self.sms: list[tuple[str, str]] = []

    async def send_email(self, to, subject, body):
        if self.fail:
            raise NotificationError("connection refused", "email")
        self.emails.append((to, subject, body))

    async def send_sms(self, phone, message):
        self.sms.append((phone, message))


@pytest.fixture
def student_repo():
    return FakeStudentRepository([
        make_student(sid, name=name, gpa=gpa, status=status)
        for sid, name, gpa, status in STUDENT_TABLE
    ])


@pytest.fixture
def course_repo():
    return FakeCourseRepository([
        make_course("CS101", "Algoritma", capacity=40, enrolled_count=10),
        make_course("CS102", "Struktur Data", capacity=30, enrolled_count=30),
        make_course("CS201", "Basis Data", capacity=35, prerequisites=("CS101",)),
    ])


@pytest.fixture
def notifier():
    return FakeNotificationService()


@pytest.fixture
def service(student_repo, course_repo, notifier):
    return EnrollmentService(
        student_repo, course_repo, notifier, GradeCalculator(),
    )


@pytest.fixture
def student_factory():
    return make_student


@pytest.fixture
def course_factory():
    return make_course


@pytest.fixture
def failing_notifier():
    return FakeNotificationService(fail=True)
