"""Enrollment Routes — enroll and drop endpoints over EnrollmentService.

Invariants:
    - POST returns 201 with the APPROVED enrollment; DELETE returns 204
    - Rule violations propagate as SiakadError and are rendered by the global handler

Design Decisions:
    - Drop addressed by (student_id, course_code) path: no enrollment ids exist
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from siakad.api.dependencies import get_enrollment_service
from siakad.core.domain_types import CourseCode, StudentId
from siakad.schemas.enrollment import EnrollmentCreate, EnrollmentResponse
from siakad.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/enrollments", tags=["enrollments"])


@router.post(
    "", response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def enroll(
    body: EnrollmentCreate,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    """Enroll a student in a course."""
    enrollment = await service.enroll_course(
        StudentId(body.student_id), CourseCode(body.course_code),
    )
    return EnrollmentResponse(
        student_id=enrollment.student_id,
        course_code=enrollment.course_code,
        status=enrollment.status,
    )


@router.delete(
    "/{student_id}/{course_code}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def drop(
    student_id: str,
    course_code: str,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    """Drop a student's seat in a course."""
    await service.drop_course(StudentId(student_id), CourseCode(course_code))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
