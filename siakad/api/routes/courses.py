"""Course Routes — create and read course offerings."""

import logging

from fastapi import APIRouter, Depends, status

from siakad.api.dependencies import get_course_repository
from siakad.core.domain_types import CourseCode
from siakad.core.errors import CourseNotFoundError
from siakad.infrastructure.sql_repositories import SqlCourseRepository
from siakad.schemas.registry import CourseCreate, CourseResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/courses", tags=["courses"])


@router.post(
    "", response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_course(
    body: CourseCreate,
    courses: SqlCourseRepository = Depends(get_course_repository),
):
    course = body.to_record()
    await courses.save(course)
    return CourseResponse.from_record(course)


@router.get("/{course_code}", response_model=CourseResponse)
async def get_course(
    course_code: str,
    courses: SqlCourseRepository = Depends(get_course_repository),
):
    course = await courses.find_by_course_code(CourseCode(course_code))
    if course is None:
        raise CourseNotFoundError(course_code)
    return CourseResponse.from_record(course)
