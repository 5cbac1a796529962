"""Enrollment Enforcement — tests for the pure precondition checks and seat mutations.

Tests cover:
    - each check returns its specific error on violation, None otherwise
    - apply_enrollment / apply_drop return new records within 0..capacity
    - credit_limit_allows is inclusive at the boundary
    - enrollment_email body names the course
"""

import pytest

from siakad.core.domain_types import AcademicStatus, CourseCode, StudentId
from siakad.core.enforce_enrollment import (
    apply_drop,
    apply_enrollment,
    check_capacity,
    check_course_found,
    check_not_suspended,
    check_prerequisite,
    check_student_found,
    credit_limit_allows,
    enrollment_email,
)
from siakad.core.errors import (
    CourseFullError,
    CourseNotFoundError,
    EnrollmentBlockedError,
    PrerequisiteNotMetError,
    StudentNotFoundError,
)
from siakad.core.records import Course, Student


def _student(status: AcademicStatus = AcademicStatus.ACTIVE) -> Student:
    return Student(
        student_id=StudentId("S001"), name="Park Sungho",
        email="park@university.ac.id", academic_status=status,
    )


def _course(capacity: int = 40, enrolled: int = 10) -> Course:
    return Course(
        course_code=CourseCode("CS101"), course_name="Algoritma",
        capacity=capacity, enrolled_count=enrolled, credits=3,
    )


# ─── lookups ─────────────────────────────────────────────────────

def test_missing_student_returns_not_found():
    error = check_student_found(None, StudentId("S999"))
    assert isinstance(error, StudentNotFoundError)
    assert error.student_id == "S999"
    assert error.http_status == 404


def test_present_student_passes():
    assert check_student_found(_student(), StudentId("S001")) is None


def test_missing_course_returns_not_found():
    error = check_course_found(None, CourseCode("CS999"))
    assert isinstance(error, CourseNotFoundError)
    assert error.course_code == "CS999"


def test_present_course_passes():
    assert check_course_found(_course(), CourseCode("CS101")) is None


# ─── academic status ─────────────────────────────────────────────

def test_suspended_student_blocked():
    error = check_not_suspended(_student(AcademicStatus.SUSPENDED))
    assert isinstance(error, EnrollmentBlockedError)
    assert error.academic_status == "SUSPENDED"


@pytest.mark.parametrize(
    "status", [AcademicStatus.ACTIVE, AcademicStatus.PROBATION],
)
def test_active_and_probation_students_pass(status):
    assert check_not_suspended(_student(status)) is None


# ─── capacity ────────────────────────────────────────────────────

def test_full_course_rejected():
    error = check_capacity(_course(capacity=30, enrolled=30))
    assert isinstance(error, CourseFullError)
    assert error.http_status == 409


def test_zero_capacity_course_rejected():
    assert isinstance(check_capacity(_course(capacity=0, enrolled=0)), CourseFullError)


def test_last_seat_available():
    assert check_capacity(_course(capacity=30, enrolled=29)) is None


# ─── prerequisite ────────────────────────────────────────────────

def test_unmet_prerequisite_rejected():
    error = check_prerequisite(False, StudentId("S001"), CourseCode("CS201"))
    assert isinstance(error, PrerequisiteNotMetError)
    assert error.course_code == "CS201"


def test_met_prerequisite_passes():
    assert check_prerequisite(True, StudentId("S001"), CourseCode("CS201")) is None


# ─── mutations ───────────────────────────────────────────────────

def test_apply_enrollment_increments_by_one():
    course = _course(enrolled=10)
    updated = apply_enrollment(course)
    assert updated.enrolled_count == 11
    assert course.enrolled_count == 10


def test_apply_enrollment_refuses_full_course():
    with pytest.raises(CourseFullError):
        apply_enrollment(_course(capacity=5, enrolled=5))


def test_apply_drop_decrements_by_one():
    assert apply_drop(_course(enrolled=10)).enrolled_count == 9


def test_apply_drop_clamps_at_zero():
    assert apply_drop(_course(enrolled=0)).enrolled_count == 0


# ─── credit limit ────────────────────────────────────────────────

def test_credit_limit_boundary_inclusive():
    assert credit_limit_allows(18, 18) is True
    assert credit_limit_allows(19, 18) is False
    assert credit_limit_allows(0, 15) is True


# ─── notification text ───────────────────────────────────────────

def test_enrollment_email_mentions_course_name():
    subject, body = enrollment_email(_student(), _course())
    assert "CS101" in subject
    assert "Algoritma" in body
    assert "Park Sungho" in body
