"""Grade Schemas — request/response bodies for the grading rules endpoints.

Invariants:
    - CourseGradeIn does NOT bound grade_point: out-of-range values must reach
      calculate_gpa so the caller gets INVALID_GRADE, not a generic validation error
"""

from pydantic import BaseModel, Field

from siakad.core.domain_types import AcademicStatus
from siakad.core.records import CourseGrade


class CourseGradeIn(BaseModel):
    course_name: str = Field(min_length=1, max_length=200)
    credits: int
    grade_point: float

    def to_record(self) -> CourseGrade:
        return CourseGrade(
            course_name=self.course_name,
            credits=self.credits,
            grade_point=self.grade_point,
        )


class GpaRequest(BaseModel):
    grades: list[CourseGradeIn] | None = None


class GpaResponse(BaseModel):
    gpa: float
    total_credits: int


class AcademicStatusResponse(BaseModel):
    gpa: float
    semester: int
    academic_status: AcademicStatus


class MaxCreditsResponse(BaseModel):
    gpa: float
    max_credits: int
