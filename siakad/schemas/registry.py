"""Registry Schemas — Pydantic models for student and course records at the API boundary.

Invariants:
    - semester >= 1, gpa within 0.0–4.0, capacity/credits >= 0
    - enrolled_count never exceeds capacity on create
    - Identifiers stripped and non-empty

Design Decisions:
    - to_record() converts into frozen core records: routes never build records by hand
"""

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from siakad.core.domain_types import AcademicStatus, CourseCode, StudentId
from siakad.core.records import Course, Student


def _strip_identifier(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("identifier cannot be empty or whitespace")
    return v


class StudentCreate(BaseModel):
    """Student registration payload."""
    student_id: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=32)
    major: str = Field("", max_length=100)
    semester: int = Field(1, ge=1)
    gpa: float = Field(0.0, ge=0.0, le=4.0)
    academic_status: AcademicStatus = AcademicStatus.ACTIVE

    @field_validator("student_id")
    @classmethod
    def strip_student_id(cls, v: str) -> str:
        return _strip_identifier(v)

    def to_record(self) -> Student:
        return Student(
            student_id=StudentId(self.student_id),
            name=self.name,
            email=str(self.email) if self.email else None,
            major=self.major,
            semester=self.semester,
            gpa=self.gpa,
            academic_status=self.academic_status,
            phone=self.phone,
        )


class StudentResponse(BaseModel):
    """Public student view."""
    student_id: str
    name: str
    email: str | None
    major: str
    semester: int
    gpa: float
    academic_status: AcademicStatus

    @classmethod
    def from_record(cls, student: Student) -> "StudentResponse":
        return cls(
            student_id=student.student_id,
            name=student.name,
            email=student.email,
            major=student.major,
            semester=student.semester,
            gpa=student.gpa,
            academic_status=student.academic_status,
        )


class CompletedCourseCreate(BaseModel):
    """Record a passed course for a student."""
    course_code: str = Field(min_length=1, max_length=20)

    @field_validator("course_code")
    @classmethod
    def strip_course_code(cls, v: str) -> str:
        return _strip_identifier(v)


class CourseCreate(BaseModel):
    """Course creation payload."""
    course_code: str = Field(min_length=1, max_length=20)
    course_name: str = Field(min_length=1, max_length=200)
    capacity: int = Field(ge=0)
    enrolled_count: int = Field(0, ge=0)
    credits: int = Field(0, ge=0)
    prerequisites: list[str] = Field(default_factory=list)

    @field_validator("course_code")
    @classmethod
    def strip_course_code(cls, v: str) -> str:
        return _strip_identifier(v)

    @model_validator(mode="after")
    def enrolled_within_capacity(self) -> "CourseCreate":
        if self.enrolled_count > self.capacity:
            raise ValueError("enrolled_count cannot exceed capacity")
        return self

    def to_record(self) -> Course:
        return Course(
            course_code=CourseCode(self.course_code),
            course_name=self.course_name,
            capacity=self.capacity,
            enrolled_count=self.enrolled_count,
            credits=self.credits,
            prerequisites=tuple(CourseCode(p) for p in self.prerequisites),
        )


class CourseResponse(BaseModel):
    """Public course view."""
    course_code: str
    course_name: str
    capacity: int
    enrolled_count: int
    seats_available: int
    credits: int
    prerequisites: list[str]

    @classmethod
    def from_record(cls, course: Course) -> "CourseResponse":
        return cls(
            course_code=course.course_code,
            course_name=course.course_name,
            capacity=course.capacity,
            enrolled_count=course.enrolled_count,
            seats_available=course.seats_available,
            credits=course.credits,
            prerequisites=list(course.prerequisites),
        )
