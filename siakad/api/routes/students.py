"""Student Routes — registration, lookup, completed courses and credit-limit checks.

Invariants:
    - Missing students → 404 STUDENT_NOT_FOUND via the global handler
    - credit-limit requires requested_credits >= 0
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from siakad.api.dependencies import get_enrollment_service, get_student_repository
from siakad.core.domain_types import CourseCode, StudentId
from siakad.core.errors import StudentNotFoundError
from siakad.infrastructure.sql_repositories import SqlStudentRepository
from siakad.schemas.enrollment import CreditLimitResponse
from siakad.schemas.registry import (
    CompletedCourseCreate, CourseResponse, StudentCreate, StudentResponse,
)
from siakad.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/students", tags=["students"])


@router.post(
    "", response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_student(
    body: StudentCreate,
    students: SqlStudentRepository = Depends(get_student_repository),
):
    """Register a student record."""
    student = body.to_record()
    await students.save(student)
    return StudentResponse.from_record(student)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: str,
    students: SqlStudentRepository = Depends(get_student_repository),
):
    student = await students.find_by_id(StudentId(student_id))
    if student is None:
        raise StudentNotFoundError(student_id)
    return StudentResponse.from_record(student)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(
    student_id: str,
    students: SqlStudentRepository = Depends(get_student_repository),
):
    await students.delete(StudentId(student_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{student_id}/completed-courses", response_model=list[CourseResponse],
)
async def list_completed_courses(
    student_id: str,
    students: SqlStudentRepository = Depends(get_student_repository),
):
    if await students.find_by_id(StudentId(student_id)) is None:
        raise StudentNotFoundError(student_id)
    courses = await students.get_completed_courses(StudentId(student_id))
    return [CourseResponse.from_record(c) for c in courses]


@router.post(
    "/{student_id}/completed-courses",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def record_completed_course(
    student_id: str,
    body: CompletedCourseCreate,
    students: SqlStudentRepository = Depends(get_student_repository),
):
    """Mark a course as passed (feeds the prerequisite check)."""
    await students.record_completed_course(
        StudentId(student_id), CourseCode(body.course_code),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{student_id}/credit-limit", response_model=CreditLimitResponse)
async def check_credit_limit(
    student_id: str,
    requested_credits: int = Query(ge=0),
    service: EnrollmentService = Depends(get_enrollment_service),
):
    """Whether the requested load fits the student's GPA-derived ceiling."""
    allowed, max_credits = await service.credit_limit_for(
        StudentId(student_id), requested_credits,
    )
    return CreditLimitResponse(
        student_id=student_id,
        requested_credits=requested_credits,
        max_credits=max_credits,
        allowed=allowed,
    )
