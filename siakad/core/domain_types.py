"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - StudentId and CourseCode wrap str — never pass bare strings through domain logic
    - GradePoint and Gpa are bounded 0.0–4.0
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (API responses, log extras)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StudentId = NewType("StudentId", str)
CourseCode = NewType("CourseCode", str)


# ─── Value Types ─────────────────────────────────────────────────

GradePoint = NewType("GradePoint", float)   # 0.0–4.0
Gpa = NewType("Gpa", float)                 # 0.0–4.0
Credits = NewType("Credits", int)           # >= 0

MIN_GRADE_POINT: float = 0.0
MAX_GRADE_POINT: float = 4.0
MIN_SEMESTER: int = 1


# ─── Enums ───────────────────────────────────────────────────────

class AcademicStatus(str, Enum):
    """Standing derived from GPA and semester. SUSPENDED blocks enrollment."""
    ACTIVE = "ACTIVE"
    PROBATION = "PROBATION"
    SUSPENDED = "SUSPENDED"


class EnrollmentStatus(str, Enum):
    """Enrollment outcome. Only APPROVED is produced by the enrollment pipeline;
    the rest are reserved for waitlist/review flows."""
    APPROVED = "APPROVED"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    WAITLISTED = "WAITLISTED"
