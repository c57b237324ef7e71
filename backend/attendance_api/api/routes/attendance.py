"""Attendance Routes — mark students present and list present/absent for a day.

Invariants:
    - Marking uses the server-local day; re-marking the same day keeps one row
    - Unknown unique_number is a 404 business response echoing the number
    - Absent means "no Present mark for the day", including never-marked students
    - date query parameter defaults to today (absent or empty) and must be YYYY-MM-DD
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from attendance_api.api.routes.classes import (
    ClassIdParam, get_class_or_404, get_gateway,
)
from attendance_api.api.routes.failure_boundary import failure_boundary
from attendance_api.core.attendance_day import DATE_PATTERN, resolve_day, today_iso
from attendance_api.core.domain_types import ClassId, StudentId
from attendance_api.models.student import Student
from attendance_api.schemas.attendance import (
    AbsentStudents, AttendanceMark, AttendanceMarked,
    PresentStudents, StudentSummary,
)
from attendance_api.services.classroom_gateway import ClassroomGateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/classes", tags=["attendance"])


def _summaries(students: list[Student]) -> list[StudentSummary]:
    return [
        StudentSummary(unique_number=s.unique_number, name=s.name)
        for s in students
    ]


@router.post("/{class_id}/attendance", response_model=AttendanceMarked)
async def mark_attendance(
    class_id: ClassIdParam,
    body: AttendanceMark,
    gateway: ClassroomGateway = Depends(get_gateway),
):
    """Mark a student of the class present for today."""
    with failure_boundary("Failed to mark attendance", class_id):
        student = await gateway.find_student(
            ClassId(class_id), body.unique_number,
        )
        if not student:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={
                    "message": "User not found",
                    "unique_number": body.unique_number,
                },
            )
        day = today_iso()
        await gateway.mark_present(StudentId(student.id), day)
    logger.info(
        "Attendance marked",
        extra={
            "class_id": class_id,
            "unique_number": body.unique_number,
            "attendance_date": day,
        },
    )
    return AttendanceMarked(unique_number=body.unique_number)


@router.get("/{class_id}/present", response_model=PresentStudents)
async def list_present_students(
    class_id: ClassIdParam,
    date: str | None = Query(None, pattern=DATE_PATTERN),
    gateway: ClassroomGateway = Depends(get_gateway),
):
    """Students of the class marked present on the day."""
    with failure_boundary("Failed to fetch present members", class_id):
        day = resolve_day(date)
        await get_class_or_404(class_id, gateway)
        students = await gateway.list_present(ClassId(class_id), day)
    return PresentStudents(
        class_id=class_id, date=day, present_students=_summaries(students),
    )


@router.get("/{class_id}/absent", response_model=AbsentStudents)
async def list_absent_students(
    class_id: ClassIdParam,
    date: str | None = Query(None, pattern=DATE_PATTERN),
    gateway: ClassroomGateway = Depends(get_gateway),
):
    """Students of the class with no present mark on the day."""
    with failure_boundary("Failed to fetch absent members", class_id):
        day = resolve_day(date)
        await get_class_or_404(class_id, gateway)
        students = await gateway.list_absent(ClassId(class_id), day)
    return AbsentStudents(
        class_id=class_id, date=day, absent_students=_summaries(students),
    )
