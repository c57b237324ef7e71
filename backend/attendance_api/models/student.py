"""Student ORM — a roster member identified by a per-class unique number.

Invariants:
    - (unique_number, class_id) is unique; the same number may exist in other classes
    - Only written through roster import (upsert on that pair)
"""

from sqlalchemy import Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from attendance_api.db.base import Base


class Student(Base):
    """Student enrolled in exactly one class."""
    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint(
            "unique_number", "class_id", name="uq_students_unique_number_class",
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    unique_number: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    class_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("classes.id"), nullable=False, index=True,
    )

    classroom: Mapped["Classroom"] = relationship(
        "Classroom", back_populates="students",
    )
    attendances: Mapped[list["Attendance"]] = relationship(
        "Attendance", back_populates="student",
    )

    def __repr__(self):
        return f"<Student {self.unique_number} class={self.class_id}>"
