"""Grade Calculator — GPA, academic standing and credit-load ceilings.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Grade points and GPA values outside 0.0–4.0 are rejected, never clamped
    - calculate_gpa never divides by zero (no credits → 0.0)
    - Threshold tables below are the single source of truth for standing and load

Design Decisions:
    - Module-level pure functions carry the rules; GradeCalculator is a stateless
      facade so the enrollment service can take the rules as an injected capability
    - Threshold tables as ordered tuples: each band's lower bound is inclusive
"""

from collections.abc import Sequence

from siakad.core.domain_types import (
    AcademicStatus, MAX_GRADE_POINT, MIN_GRADE_POINT, MIN_SEMESTER,
)
from siakad.core.errors import InvalidArgumentError, InvalidGradeError
from siakad.core.records import CourseGrade


PROBATION_FLOOR: float = 2.00

# (last semester of bucket or None for open-ended, ACTIVE threshold)
ACTIVE_THRESHOLDS: tuple[tuple[int | None, float], ...] = (
    (2, 2.00),
    (4, 2.25),
    (None, 2.50),
)

# First semester in which a GPA below PROBATION_FLOOR suspends the student
SUSPENSION_STARTS_AT_SEMESTER: int = 3

# (GPA lower bound, max credits), highest band first
CREDIT_BANDS: tuple[tuple[float, int], ...] = (
    (3.00, 24),
    (2.50, 21),
    (2.00, 18),
)
MIN_CREDIT_LOAD: int = 15


def _check_gpa(gpa: float) -> None:
    if not MIN_GRADE_POINT <= gpa <= MAX_GRADE_POINT:
        raise InvalidArgumentError(
            f"GPA must be between {MIN_GRADE_POINT} and {MAX_GRADE_POINT}, got {gpa}",
            field="gpa",
        )


def calculate_gpa(grades: Sequence[CourseGrade] | None) -> float:
    """Credit-weighted mean of grade points. Empty, None or zero credits → 0.0."""
    if not grades:
        return 0.0

    for grade in grades:
        if not MIN_GRADE_POINT <= grade.grade_point <= MAX_GRADE_POINT:
            raise InvalidGradeError(
                f"Invalid grade point: {grade.grade_point}", grade.grade_point,
            )
        if grade.credits < 0:
            raise InvalidGradeError(
                f"Invalid credit weight: {grade.credits}", grade.credits,
            )

    total_credits = sum(g.credits for g in grades)
    if total_credits == 0:
        return 0.0
    weighted = sum(g.grade_point * g.credits for g in grades)
    return weighted / total_credits


def active_threshold_for(semester: int) -> float:
    """GPA needed to stay ACTIVE in the given semester."""
    for last_semester, threshold in ACTIVE_THRESHOLDS:
        if last_semester is None or semester <= last_semester:
            return threshold
    raise AssertionError("ACTIVE_THRESHOLDS must end with an open-ended bucket")


def determine_academic_status(gpa: float, semester: int) -> AcademicStatus:
    """Classify standing from GPA and semester number."""
    _check_gpa(gpa)
    if semester < MIN_SEMESTER:
        raise InvalidArgumentError(
            f"Semester must be >= {MIN_SEMESTER}, got {semester}",
            field="semester",
        )

    if gpa >= active_threshold_for(semester):
        return AcademicStatus.ACTIVE
    if semester < SUSPENSION_STARTS_AT_SEMESTER or gpa >= PROBATION_FLOOR:
        return AcademicStatus.PROBATION
    return AcademicStatus.SUSPENDED


def calculate_max_credits(gpa: float) -> int:
    """Maximum credit load a student may carry for the given GPA."""
    _check_gpa(gpa)
    for lower_bound, max_credits in CREDIT_BANDS:
        if gpa >= lower_bound:
            return max_credits
    return MIN_CREDIT_LOAD


class GradeCalculator:
    """Stateless facade over the grading rules. Safe to share across tasks."""

    def calculate_gpa(self, grades: Sequence[CourseGrade] | None) -> float:
        return calculate_gpa(grades)

    def determine_academic_status(self, gpa: float, semester: int) -> AcademicStatus:
        return determine_academic_status(gpa, semester)

    def calculate_max_credits(self, gpa: float) -> int:
        return calculate_max_credits(gpa)
