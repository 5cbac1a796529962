"""Course ORM — persists course offerings and their seat counts.

Invariants:
    - course_code is the natural primary key
    - 0 <= enrolled_count <= capacity (CHECK constraint, second guard behind the service lock)
    - prerequisites live in course_prerequisites (one row per required course)
    - version increments on every update; a write based on an older version is rejected
"""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from siakad.db.base import Base


class CourseModel(Base):
    """Course row."""
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("capacity >= 0", name="ck_courses_capacity"),
        CheckConstraint(
            "enrolled_count >= 0 AND enrolled_count <= capacity",
            name="ck_courses_enrolled_count",
        ),
        CheckConstraint("credits >= 0", name="ck_courses_credits"),
    )

    course_code: Mapped[str] = mapped_column(String(20), primary_key=True)
    course_name: Mapped[str] = mapped_column(String(200), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    enrolled_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    credits: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class CoursePrerequisiteModel(Base):
    """course_code requires prerequisite_code to have been completed."""
    __tablename__ = "course_prerequisites"

    course_code: Mapped[str] = mapped_column(
        String(20), ForeignKey("courses.course_code", ondelete="CASCADE"),
        primary_key=True,
    )
    prerequisite_code: Mapped[str] = mapped_column(
        String(20), ForeignKey("courses.course_code", ondelete="CASCADE"),
        primary_key=True,
    )
