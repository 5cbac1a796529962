"""Initial schema — students, courses, prerequisites, completed courses.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "students",
        sa.Column("student_id", sa.String(20), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("major", sa.String(100), nullable=False, server_default=""),
        sa.Column("semester", sa.Integer, nullable=False, server_default="1"),
        sa.Column("gpa", sa.Float, nullable=False, server_default="0"),
        sa.Column("academic_status", sa.String(20), nullable=False, server_default="ACTIVE"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("semester >= 1", name="ck_students_semester"),
        sa.CheckConstraint("gpa >= 0.0 AND gpa <= 4.0", name="ck_students_gpa"),
    )

    op.create_table(
        "courses",
        sa.Column("course_code", sa.String(20), primary_key=True),
        sa.Column("course_name", sa.String(200), nullable=False),
        sa.Column("capacity", sa.Integer, nullable=False),
        sa.Column("enrolled_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("credits", sa.Integer, nullable=False, server_default="0"),
        sa.Column("version", sa.Integer, nullable=False, server_default="0"),
        sa.CheckConstraint("capacity >= 0", name="ck_courses_capacity"),
        sa.CheckConstraint(
            "enrolled_count >= 0 AND enrolled_count <= capacity",
            name="ck_courses_enrolled_count",
        ),
        sa.CheckConstraint("credits >= 0", name="ck_courses_credits"),
    )

    op.create_table(
        "course_prerequisites",
        sa.Column(
            "course_code", sa.String(20),
            sa.ForeignKey("courses.course_code", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "prerequisite_code", sa.String(20),
            sa.ForeignKey("courses.course_code", ondelete="CASCADE"), primary_key=True,
        ),
    )

    op.create_table(
        "student_completed_courses",
        sa.Column(
            "student_id", sa.String(20),
            sa.ForeignKey("students.student_id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "course_code", sa.String(20),
            sa.ForeignKey("courses.course_code", ondelete="CASCADE"), primary_key=True,
        ),
    )


def downgrade() -> None:
    op.drop_table("student_completed_courses")
    op.drop_table("course_prerequisites")
    op.drop_table("courses")
    op.drop_table("students")
