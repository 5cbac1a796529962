"""API Dependencies — FastAPI providers for the process-wide service graph.

Invariants:
    - One EnrollmentService per process (built in the lifespan, stored on app.state)
    - Routes receive collaborators through Depends, never through module globals

Design Decisions:
    - app.state over module-level singletons: tests swap the whole graph by assigning
      app.state.container, no module patching
"""

from dataclasses import dataclass

from fastapi import Request

from siakad.core.grade_calculator import GradeCalculator
from siakad.infrastructure.sql_repositories import (
    SqlCourseRepository, SqlStudentRepository,
)
from siakad.services.enrollment_service import EnrollmentService


@dataclass
class ServiceContainer:
    """Everything the routes need, wired once at startup."""
    student_repository: SqlStudentRepository
    course_repository: SqlCourseRepository
    grade_calculator: GradeCalculator
    enrollment_service: EnrollmentService


def get_container(request: Request) -> ServiceContainer:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Service container not initialized")
    return container


def get_enrollment_service(request: Request) -> EnrollmentService:
    return get_container(request).enrollment_service


def get_student_repository(request: Request) -> SqlStudentRepository:
    return get_container(request).student_repository


def get_course_repository(request: Request) -> SqlCourseRepository:
    return get_container(request).course_repository


def get_grade_calculator(request: Request) -> GradeCalculator:
    return get_container(request).grade_calculator
