"""Enrollment Schemas — request/response bodies for enroll, drop and credit checks."""

from pydantic import BaseModel, Field

from siakad.core.domain_types import EnrollmentStatus


class EnrollmentCreate(BaseModel):
    """Enroll one student in one course."""
    student_id: str = Field(min_length=1, max_length=20)
    course_code: str = Field(min_length=1, max_length=20)


class EnrollmentResponse(BaseModel):
    student_id: str
    course_code: str
    status: EnrollmentStatus


class CreditLimitResponse(BaseModel):
    """Outcome of validate_credit_limit with the ceiling it was checked against."""
    student_id: str
    requested_credits: int
    max_credits: int
    allowed: bool
