"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models never leave infrastructure: repositories convert them into core records

Design Decisions:
    - One file per aggregate (student, course) with its link table alongside
    - All models imported here so Base.metadata is complete before create_all / migrations
"""

from siakad.models.student import StudentModel, CompletedCourseModel  # noqa: F401
from siakad.models.course import CourseModel, CoursePrerequisiteModel  # noqa: F401
