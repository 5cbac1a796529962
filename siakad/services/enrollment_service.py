"""Enrollment Service — imperative shell around the pure enrollment checks.

Invariants:
    - enroll_course evaluates checks in fixed order: student found → not suspended →
      course found → seat free → prerequisite met; the first violation is raised
    - No repository write happens before every check has passed
    - Course read, capacity check, increment and update run under the course lock
    - A course lock is created only after the course lookup succeeded, so unknown
      codes never add entries to CourseLockRegistry
    - Exactly one confirmation email per successful enrollment, sent to student.email

Design Decisions:
    - All collaborators injected through __init__; no global lookup
    - The email goes out after the lock is released so slow mail servers never
      hold a course's seat accounting
    - A NotificationError after the seat is persisted is logged, not raised:
      the enrollment already happened and is returned to the caller
"""

import logging

from siakad.core.domain_types import CourseCode, StudentId
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
from siakad.core.errors import NotificationError
from siakad.core.records import Course, Enrollment, Student
from siakad.core.repository_protocols import (
    CourseRepository,
    GradeRules,
    NotificationService,
    StudentRepository,
)
from siakad.services.course_locks import CourseLockRegistry

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Enroll, drop and credit-limit operations over injected repositories."""

    def __init__(
        self,
        student_repository: StudentRepository,
        course_repository: CourseRepository,
        notification_service: NotificationService,
        grade_calculator: GradeRules,
        locks: CourseLockRegistry | None = None,
    ):
        self.student_repository = student_repository
        self.course_repository = course_repository
        self.notification_service = notification_service
        self.grade_calculator = grade_calculator
        self.locks = locks or CourseLockRegistry()

    async def _get_student(self, student_id: StudentId) -> Student:
        student = await self.student_repository.find_by_id(student_id)
        if error := check_student_found(student, student_id):
            raise error
        return student

    async def _get_course(self, course_code: CourseCode) -> Course:
        course = await self.course_repository.find_by_course_code(course_code)
        if error := check_course_found(course, course_code):
            raise error
        return course

    async def enroll_course(
        self, student_id: StudentId, course_code: CourseCode,
    ) -> Enrollment:
        """Validate and apply an enrollment, then notify the student."""
        student = await self._get_student(student_id)
        if error := check_not_suspended(student):
            logger.info(
                "Enrollment blocked by academic status",
                extra={"student_id": student_id, "error_code": error.code},
            )
            raise error

        # locks are only created for courses that exist
        await self._get_course(course_code)
        async with self.locks.lock_for(course_code):
            course = await self._get_course(course_code)
            if error := check_capacity(course):
                logger.info(
                    "Enrollment rejected: course full",
                    extra={"student_id": student_id, "course_code": course_code},
                )
                raise error
            met = await self.course_repository.is_prerequisite_met(
                student_id, course_code,
            )
            if error := check_prerequisite(met, student_id, course_code):
                raise error

            updated = apply_enrollment(course)
            await self.course_repository.update(updated)

        enrollment = Enrollment(student_id=student_id, course_code=course_code)
        logger.info(
            "Enrollment approved",
            extra={
                "student_id": student_id,
                "course_code": course_code,
                "status": enrollment.status.value,
            },
        )
        await self._notify_enrolled(student, updated)
        return enrollment

    async def _notify_enrolled(self, student: Student, course: Course) -> None:
        subject, body = enrollment_email(student, course)
        try:
            await self.notification_service.send_email(student.email, subject, body)
        except NotificationError as e:
            logger.warning(
                "Enrollment email not delivered: %s", e.message,
                extra={
                    "student_id": student.student_id,
                    "course_code": course.course_code,
                    "error_code": e.code,
                },
            )

    async def drop_course(
        self, student_id: StudentId, course_code: CourseCode,
    ) -> None:
        """Release the student's seat in the course."""
        await self._get_student(student_id)

        await self._get_course(course_code)
        async with self.locks.lock_for(course_code):
            course = await self._get_course(course_code)
            await self.course_repository.update(apply_drop(course))

        logger.info(
            "Course dropped",
            extra={"student_id": student_id, "course_code": course_code},
        )

    async def validate_credit_limit(
        self, student_id: StudentId, requested_credits: int,
    ) -> bool:
        """True when the requested load fits the student's GPA-derived ceiling."""
        allowed, _ = await self.credit_limit_for(student_id, requested_credits)
        return allowed

    async def credit_limit_for(
        self, student_id: StudentId, requested_credits: int,
    ) -> tuple[bool, int]:
        """(allowed, max_credits) from a single student lookup."""
        max_credits = await self.max_credits_for(student_id)
        return credit_limit_allows(requested_credits, max_credits), max_credits

    async def max_credits_for(self, student_id: StudentId) -> int:
        """GPA-derived credit ceiling for the student."""
        student = await self._get_student(student_id)
        return self.grade_calculator.calculate_max_credits(student.gpa)
