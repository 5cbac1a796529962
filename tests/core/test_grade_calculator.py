"""Grade Calculator — tests for GPA, academic standing and credit ceilings.

Tests cover:
    - calculate_gpa weighted mean, empty/None input, zero-credit input
    - calculate_gpa rejects out-of-range grade points and negative credits
    - determine_academic_status decision table per semester bucket
    - determine_academic_status / calculate_max_credits reject invalid input
    - calculate_max_credits bands with inclusive lower bounds
    - GradeCalculator facade delegates to the pure functions
"""

import pytest

from siakad.core.domain_types import AcademicStatus
from siakad.core.errors import InvalidArgumentError, InvalidGradeError
from siakad.core.grade_calculator import (
    GradeCalculator,
    active_threshold_for,
    calculate_gpa,
    calculate_max_credits,
    determine_academic_status,
)
from siakad.core.records import CourseGrade


# ─── calculate_gpa ───────────────────────────────────────────────

def test_gpa_is_credit_weighted_mean():
    grades = [
        CourseGrade("Math", 3, 4.0),
        CourseGrade("Physics", 3, 3.0),
    ]
    assert calculate_gpa(grades) == 3.5


def test_gpa_weights_by_credits():
    grades = [
        CourseGrade("Thesis", 6, 4.0),
        CourseGrade("Seminar", 2, 2.0),
    ]
    # (6*4 + 2*2) / 8
    assert calculate_gpa(grades) == pytest.approx(3.5)


def test_gpa_empty_list_is_zero():
    assert calculate_gpa([]) == 0.0


def test_gpa_none_is_zero():
    assert calculate_gpa(None) == 0.0


def test_gpa_zero_total_credits_is_zero():
    grades = [
        CourseGrade("Math", 0, 4.0),
        CourseGrade("Physics", 0, 3.0),
    ]
    assert calculate_gpa(grades) == 0.0


def test_gpa_accepts_range_endpoints():
    grades = [CourseGrade("A", 2, 0.0), CourseGrade("B", 2, 4.0)]
    assert calculate_gpa(grades) == 2.0


@pytest.mark.parametrize("bad_point", [4.5, 5.0, -1.0, -0.01, 4.01])
def test_gpa_rejects_out_of_range_grade_point(bad_point):
    with pytest.raises(InvalidGradeError) as exc_info:
        calculate_gpa([CourseGrade("Math", 3, bad_point)])
    assert "Invalid grade point" in exc_info.value.message
    assert str(bad_point) in exc_info.value.message
    assert exc_info.value.value == bad_point


def test_gpa_rejects_whole_list_when_one_entry_invalid():
    grades = [
        CourseGrade("Math", 3, 4.0),
        CourseGrade("Physics", 3, 4.5),
    ]
    with pytest.raises(InvalidGradeError):
        calculate_gpa(grades)


def test_gpa_rejects_negative_credits():
    with pytest.raises(InvalidGradeError) as exc_info:
        calculate_gpa([CourseGrade("Math", -3, 3.0)])
    assert exc_info.value.code == "INVALID_GRADE"


# ─── determine_academic_status ───────────────────────────────────

@pytest.mark.parametrize(
    "gpa, semester, expected",
    [
        (2.0, 1, AcademicStatus.ACTIVE),
        (3.5, 2, AcademicStatus.ACTIVE),
        (1.9, 2, AcademicStatus.PROBATION),
        (0.0, 1, AcademicStatus.PROBATION),
        (2.25, 3, AcademicStatus.ACTIVE),
        (3.0, 4, AcademicStatus.ACTIVE),
        (2.1, 3, AcademicStatus.PROBATION),
        (2.0, 4, AcademicStatus.PROBATION),
        (1.9, 4, AcademicStatus.SUSPENDED),
        (2.5, 5, AcademicStatus.ACTIVE),
        (2.2, 6, AcademicStatus.PROBATION),
        (2.49, 8, AcademicStatus.PROBATION),
        (1.5, 7, AcademicStatus.SUSPENDED),
        (1.99, 12, AcademicStatus.SUSPENDED),
    ],
)
def test_academic_status_table(gpa, semester, expected):
    assert determine_academic_status(gpa, semester) == expected


def test_early_semesters_never_suspend():
    for semester in (1, 2):
        assert determine_academic_status(0.0, semester) == AcademicStatus.PROBATION


@pytest.mark.parametrize("gpa", [-1.0, 4.5, -0.01, 4.01])
def test_academic_status_rejects_invalid_gpa(gpa):
    with pytest.raises(InvalidArgumentError) as exc_info:
        determine_academic_status(gpa, 1)
    assert exc_info.value.field == "gpa"


@pytest.mark.parametrize("semester", [0, -1])
def test_academic_status_rejects_invalid_semester(semester):
    with pytest.raises(InvalidArgumentError) as exc_info:
        determine_academic_status(3.0, semester)
    assert exc_info.value.field == "semester"


def test_active_threshold_buckets():
    assert active_threshold_for(1) == 2.00
    assert active_threshold_for(2) == 2.00
    assert active_threshold_for(3) == 2.25
    assert active_threshold_for(4) == 2.25
    assert active_threshold_for(5) == 2.50
    assert active_threshold_for(14) == 2.50


# ─── calculate_max_credits ───────────────────────────────────────

@pytest.mark.parametrize(
    "gpa, expected",
    [
        (4.0, 24), (3.5, 24), (3.0, 24),
        (2.99, 21), (2.7, 21), (2.5, 21),
        (2.49, 18), (2.3, 18), (2.0, 18),
        (1.99, 15), (1.5, 15), (0.0, 15),
    ],
)
def test_max_credits_bands(gpa, expected):
    assert calculate_max_credits(gpa) == expected


@pytest.mark.parametrize("gpa", [-0.1, 4.1])
def test_max_credits_rejects_invalid_gpa(gpa):
    with pytest.raises(InvalidArgumentError):
        calculate_max_credits(gpa)


# ─── GradeCalculator facade ──────────────────────────────────────

def test_facade_matches_pure_functions():
    calculator = GradeCalculator()
    grades = [CourseGrade("Math", 3, 4.0), CourseGrade("Physics", 3, 3.0)]
    assert calculator.calculate_gpa(grades) == 3.5
    assert calculator.determine_academic_status(1.9, 4) == AcademicStatus.SUSPENDED
    assert calculator.calculate_max_credits(2.7) == 21
