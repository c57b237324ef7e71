"""Attendance Schemas — marking requests and present/absent listings.

Invariants:
    - AttendanceMark.unique_number: stripped, non-empty; numeric JSON values
      are accepted as strings (rosters often hold numeric IDs)
    - Listing payloads expose unique_number and name only
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from attendance_api.core.domain_types import AttendanceStatus


class AttendanceMark(BaseModel):
    """Mark-present request body."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    unique_number: str = Field(min_length=1, max_length=100)

    @field_validator("unique_number")
    @classmethod
    def strip_unique_number(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Unique number is required")
        return v


class AttendanceMarked(BaseModel):
    message: str = "Attendance updated"
    unique_number: str
    status: AttendanceStatus = AttendanceStatus.PRESENT


class StudentSummary(BaseModel):
    unique_number: str
    name: str


class PresentStudents(BaseModel):
    class_id: int
    date: str
    present_students: list[StudentSummary]


class AbsentStudents(BaseModel):
    class_id: int
    date: str
    absent_students: list[StudentSummary]
