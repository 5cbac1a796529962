"""Grade Routes — stateless access to the grading rules.

Invariants:
    - No persistence: every endpoint is a pure computation over its input
    - Out-of-range GPA/semester/grade → 400 INVALID_ARGUMENT / INVALID_GRADE from core
"""

from fastapi import APIRouter, Depends, Query

from siakad.api.dependencies import get_grade_calculator
from siakad.core.grade_calculator import GradeCalculator
from siakad.schemas.grades import (
    AcademicStatusResponse, GpaRequest, GpaResponse, MaxCreditsResponse,
)

router = APIRouter(prefix="/api/v1/grades", tags=["grades"])


@router.post("/gpa", response_model=GpaResponse)
async def compute_gpa(
    body: GpaRequest,
    calculator: GradeCalculator = Depends(get_grade_calculator),
):
    grades = [g.to_record() for g in body.grades] if body.grades else None
    gpa = calculator.calculate_gpa(grades)
    return GpaResponse(
        gpa=gpa, total_credits=sum(g.credits for g in grades or ()),
    )


@router.get("/academic-status", response_model=AcademicStatusResponse)
async def academic_status(
    gpa: float = Query(...),
    semester: int = Query(...),
    calculator: GradeCalculator = Depends(get_grade_calculator),
):
    return AcademicStatusResponse(
        gpa=gpa,
        semester=semester,
        academic_status=calculator.determine_academic_status(gpa, semester),
    )


@router.get("/max-credits", response_model=MaxCreditsResponse)
async def max_credits(
    gpa: float = Query(...),
    calculator: GradeCalculator = Depends(get_grade_calculator),
):
    return MaxCreditsResponse(
        gpa=gpa, max_credits=calculator.calculate_max_credits(gpa),
    )
