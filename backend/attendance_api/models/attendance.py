"""Attendance ORM — one row per (student, day).

Invariants:
    - (student_id, date) is unique; re-marking overwrites status
    - date is a YYYY-MM-DD string (server-local day)
    - status is currently always "Present"
"""

from sqlalchemy import Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from attendance_api.core.domain_types import AttendanceStatus
from attendance_api.db.base import Base


class Attendance(Base):
    """Attendance mark for a student on a calendar day."""
    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    student_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("students.id"), nullable=False,
    )
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=AttendanceStatus.PRESENT.value,
    )

    student: Mapped["Student"] = relationship(
        "Student", back_populates="attendances",
    )
