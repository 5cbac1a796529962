"""Student ORM — persists registrar-maintained student records.

Invariants:
    - student_id is the natural primary key (registrar-issued)
    - semester >= 1 and gpa within 0.0–4.0 (CHECK constraints)
    - academic_status holds an AcademicStatus value
    - completed courses live in student_completed_courses (one row per course)

Design Decisions:
    - Natural string keys over surrogate UUIDs: registrar ids and course codes are
      already unique and are what every caller passes in
    - Completed courses as a mapped link class: the prerequisite check is a single
      set comparison over these rows
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint, DateTime, Float, ForeignKey, Integer, String,
)
from sqlalchemy.orm import Mapped, mapped_column

from siakad.core.domain_types import AcademicStatus
from siakad.db.base import Base


class StudentModel(Base):
    """Student row."""
    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint("semester >= 1", name="ck_students_semester"),
        CheckConstraint("gpa >= 0.0 AND gpa <= 4.0", name="ck_students_gpa"),
    )

    student_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    major: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    semester: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    gpa: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    academic_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=AcademicStatus.ACTIVE.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class CompletedCourseModel(Base):
    """A course the student has passed."""
    __tablename__ = "student_completed_courses"

    student_id: Mapped[str] = mapped_column(
        String(20), ForeignKey("students.student_id", ondelete="CASCADE"),
        primary_key=True,
    )
    course_code: Mapped[str] = mapped_column(
        String(20), ForeignKey("courses.course_code", ondelete="CASCADE"),
        primary_key=True,
    )
