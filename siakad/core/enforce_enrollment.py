"""Enrollment Enforcement — pure precondition checks and course mutations.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Checks return an error value on violation, None on success
    - The service evaluates checks in fixed order — first error wins
    - apply_enrollment / apply_drop return NEW records; enrolled_count stays in 0..capacity

Design Decisions:
    - Return errors (not raise) from checks: the ordering of the chain is visible
      at the call site and each rule is testable without mocks
    - The shell raises the first error at its public boundary so callers still
      get one distinguishable exception per failed operation
"""

from dataclasses import replace

from siakad.core.domain_types import AcademicStatus, CourseCode, StudentId
from siakad.core.errors import (
    CourseFullError,
    CourseNotFoundError,
    EnrollmentBlockedError,
    PrerequisiteNotMetError,
    StudentNotFoundError,
)
from siakad.core.records import Course, Student


def check_student_found(
    student: Student | None, student_id: StudentId,
) -> StudentNotFoundError | None:
    """Rule 1: the student must exist."""
    if student is None:
        return StudentNotFoundError(student_id)
    return None


def check_not_suspended(student: Student) -> EnrollmentBlockedError | None:
    """Rule 2: suspended students cannot enroll."""
    if student.academic_status == AcademicStatus.SUSPENDED:
        return EnrollmentBlockedError(
            student.student_id, AcademicStatus.SUSPENDED.value,
        )
    return None


def check_course_found(
    course: Course | None, course_code: CourseCode,
) -> CourseNotFoundError | None:
    """Rule 3: the course must exist."""
    if course is None:
        return CourseNotFoundError(course_code)
    return None


def check_capacity(course: Course) -> CourseFullError | None:
    """Rule 4: a seat must be free."""
    if course.is_full:
        return CourseFullError(course.course_code, course.capacity)
    return None


def check_prerequisite(
    prerequisite_met: bool, student_id: StudentId, course_code: CourseCode,
) -> PrerequisiteNotMetError | None:
    """Rule 5: prerequisites must be satisfied."""
    if not prerequisite_met:
        return PrerequisiteNotMetError(student_id, course_code)
    return None


def apply_enrollment(course: Course) -> Course:
    """Occupy one seat. Caller must have passed check_capacity under the course lock."""
    if course.is_full:
        raise CourseFullError(course.course_code, course.capacity)
    return replace(course, enrolled_count=course.enrolled_count + 1)


def apply_drop(course: Course) -> Course:
    """Free one seat, never going below zero."""
    return replace(course, enrolled_count=max(course.enrolled_count - 1, 0))


def credit_limit_allows(requested_credits: int, max_credits: int) -> bool:
    """Requesting exactly the maximum is allowed."""
    return requested_credits <= max_credits


def enrollment_email(student: Student, course: Course) -> tuple[str, str]:
    """Subject and body for the enrollment confirmation email."""
    subject = f"Enrollment approved: {course.course_code}"
    body = (
        f"Dear {student.name},\n\n"
        f"You have been enrolled in {course.course_name} ({course.course_code}).\n"
    )
    return subject, body
