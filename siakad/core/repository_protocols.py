"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Lookups return None for "absent"; the service translates None into a not-found error
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the pure rules that consume their results are never async themselves
"""

from collections.abc import Sequence
from typing import Protocol

from siakad.core.domain_types import AcademicStatus, CourseCode, StudentId
from siakad.core.records import Course, CourseGrade, Student


class StudentRepository(Protocol):
    """Contract for student persistence — implemented by shell."""
    async def find_by_id(self, student_id: StudentId) -> Student | None: ...
    async def save(self, student: Student) -> None: ...
    async def update(self, student: Student) -> None: ...
    async def get_completed_courses(self, student_id: StudentId) -> list[Course]: ...
    async def delete(self, student_id: StudentId) -> None: ...


class CourseRepository(Protocol):
    """Contract for course persistence — implemented by shell."""
    async def find_by_course_code(self, course_code: CourseCode) -> Course | None: ...
    async def save(self, course: Course) -> None: ...
    async def update(self, course: Course) -> None: ...
    async def is_prerequisite_met(
        self, student_id: StudentId, course_code: CourseCode,
    ) -> bool: ...


class NotificationService(Protocol):
    """Contract for outbound messaging — implemented by shell."""
    async def send_email(self, to: str | None, subject: str, body: str) -> None: ...
    async def send_sms(self, phone: str, message: str) -> None: ...


class GradeRules(Protocol):
    """Contract for the grading rules consumed by the enrollment service."""
    def calculate_gpa(self, grades: Sequence[CourseGrade] | None) -> float: ...
    def determine_academic_status(
        self, gpa: float, semester: int,
    ) -> AcademicStatus: ...
    def calculate_max_credits(self, gpa: float) -> int: ...
