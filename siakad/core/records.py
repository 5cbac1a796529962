"""Domain Records — immutable snapshots of students, courses and their outcomes.

Invariants:
    - Records are frozen: a state change produces a new record (dataclasses.replace)
    - Course.enrolled_count stays within 0..capacity (enforced by enforce_enrollment)
    - CourseGrade.course_name is a label only, not a foreign key
    - Course.version is the persisted row version the record was read at

Design Decisions:
    - Frozen dataclasses over ORM objects in core: repositories translate rows into
      records at the boundary, so core logic never touches a DB session
"""

from dataclasses import dataclass, field

from siakad.core.domain_types import (
    AcademicStatus, CourseCode, EnrollmentStatus, StudentId,
)


@dataclass(frozen=True)
class Student:
    """Student as maintained by the registrar."""
    student_id: StudentId
    name: str
    email: str | None = None
    major: str = ""
    semester: int = 1
    gpa: float = 0.0
    academic_status: AcademicStatus = AcademicStatus.ACTIVE
    phone: str | None = None


@dataclass(frozen=True)
class Course:
    """Course offering with its current occupancy."""
    course_code: CourseCode
    course_name: str
    capacity: int
    enrolled_count: int = 0
    credits: int = 0
    prerequisites: tuple[CourseCode, ...] = field(default_factory=tuple)
    version: int = 0

    @property
    def seats_available(self) -> int:
        return max(self.capacity - self.enrolled_count, 0)

    @property
    def is_full(self) -> bool:
        return self.enrolled_count >= self.capacity


@dataclass(frozen=True)
class Enrollment:
    """Result of a successful enroll_course call."""
    student_id: StudentId
    course_code: CourseCode
    status: EnrollmentStatus = EnrollmentStatus.APPROVED


@dataclass(frozen=True)
class CourseGrade:
    """One graded course as input to GPA computation."""
    course_name: str
    credits: int
    grade_point: float
