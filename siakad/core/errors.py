"""Error Hierarchy — typed, categorized exceptions for all enrollment failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Each enrollment precondition maps to exactly one error class
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SiakadError base: FastAPI global handler catches all (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    student_id: str | None = None
    course_code: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class SiakadError(Exception):
    """Base exception for all enrollment and grading errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "student_id": self.context.student_id,
                    "course_code": self.context.course_code,
                },
            }
        }


# ─── Lookup Errors (404) ────────────────────────────────────────

class ResourceNotFoundError(SiakadError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        code: str = "RESOURCE_NOT_FOUND",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            code, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_id = resource_id


class StudentNotFoundError(ResourceNotFoundError):
    """Referenced student id has no record."""
    def __init__(self, student_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(student_id=student_id)
        super().__init__("Student", student_id, "STUDENT_NOT_FOUND", ctx)
        self.student_id = student_id


class CourseNotFoundError(ResourceNotFoundError):
    """Referenced course code has no record."""
    def __init__(self, course_code: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(course_code=course_code)
        super().__init__("Course", course_code, "COURSE_NOT_FOUND", ctx)
        self.course_code = course_code


# ─── Enrollment Rule Errors ─────────────────────────────────────

class EnrollmentBlockedError(SiakadError):
    """Student's academic status forbids enrollment."""
    def __init__(
        self, student_id: str, academic_status: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Student '{student_id}' cannot enroll while {academic_status}",
            "ENROLLMENT_BLOCKED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR,
            context or ErrorContext(student_id=student_id), 403,
        )
        self.student_id = student_id
        self.academic_status = academic_status


class CourseFullError(SiakadError):
    """Course is at capacity."""
    def __init__(
        self, course_code: str, capacity: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Course '{course_code}' is full ({capacity}/{capacity})",
            "COURSE_FULL", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR,
            context or ErrorContext(course_code=course_code), 409,
        )
        self.course_code = course_code
        self.capacity = capacity


class PrerequisiteNotMetError(SiakadError):
    """Student has not completed the course's prerequisites."""
    def __init__(
        self, student_id: str, course_code: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Student '{student_id}' has not met the prerequisites for '{course_code}'",
            "PREREQUISITE_NOT_MET", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR,
            context or ErrorContext(student_id=student_id, course_code=course_code),
            400,
        )
        self.student_id = student_id
        self.course_code = course_code


# ─── Grading Errors ─────────────────────────────────────────────

class InvalidGradeError(SiakadError):
    """Grade entry outside the accepted range."""
    def __init__(self, message: str, value: float, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_GRADE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value


class InvalidArgumentError(SiakadError):
    """GPA or semester outside the accepted range."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ConcurrentUpdateError(SiakadError):
    """Course row changed since it was read; the write was not applied."""
    def __init__(
        self, course_code: str, version: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Course '{course_code}' was modified concurrently (stale version {version})",
            "CONCURRENT_UPDATE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING,
            context or ErrorContext(course_code=course_code), 409,
        )
        self.course_code = course_code
        self.version = version


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SiakadError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class NotificationError(SiakadError):
    """Outbound email or SMS delivery failed."""
    def __init__(self, message: str, channel: str, context: ErrorContext | None = None):
        super().__init__(
            f"Notification via {channel} failed: {message}",
            "NOTIFICATION_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 502,
        )
        self.channel = channel
