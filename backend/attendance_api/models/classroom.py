"""Classroom ORM — a named roster of students (table `classes`).

Invariants:
    - id is a generated integer primary key
    - Created once, never updated or deleted through the API
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from attendance_api.db.base import Base


class Classroom(Base):
    """Class aggregate root — owns its students."""
    __tablename__ = "classes"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    students: Mapped[list["Student"]] = relationship(
        "Student", back_populates="classroom",
    )
