"""SIAKAD Enrollment API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SiakadError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Service graph (DB, repositories, notifications, EnrollmentService) built once in lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - A single EnrollmentService instance per process: its CourseLockRegistry must be
      shared by every request touching the same course
    - CourseLockRegistry serializes seat updates within one worker only; across workers
      the versioned course update rejects stale writes with 409 CONCURRENT_UPDATE
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from siakad.api.dependencies import ServiceContainer
from siakad.api.error_handlers import register_error_handlers
from siakad.api.routes import courses, enrollments, grades, health, students
from siakad.config import Settings, get_settings
from siakad.core.grade_calculator import GradeCalculator
from siakad.infrastructure.database import DatabaseSessionManager, init_db
from siakad.infrastructure.notifications import MailNotificationService
from siakad.infrastructure.observability import setup_logging
from siakad.infrastructure.sql_repositories import (
    SqlCourseRepository, SqlStudentRepository,
)
from siakad.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)


def build_container(
    db: DatabaseSessionManager,
    settings: Settings,
    notification_service=None,
) -> ServiceContainer:
    """Wire repositories, rules and the enrollment service over one DB manager."""
    student_repository = SqlStudentRepository(db)
    course_repository = SqlCourseRepository(db)
    grade_calculator = GradeCalculator()
    enrollment_service = EnrollmentService(
        student_repository,
        course_repository,
        notification_service or MailNotificationService(settings),
        grade_calculator,
    )
    return ServiceContainer(
        student_repository=student_repository,
        course_repository=course_repository,
        grade_calculator=grade_calculator,
        enrollment_service=enrollment_service,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    notifications = MailNotificationService(settings)
    app.state.container = build_container(db, settings, notifications)
    logger.info("SIAKAD API started")
    yield
    logger.info("SIAKAD API shutting down")
    await notifications.aclose()
    await db.dispose()


app = FastAPI(
    title="SIAKAD Enrollment API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(students.router)
app.include_router(courses.router)
app.include_router(enrollments.router)
app.include_router(grades.router)

register_error_handlers(app)
