"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Classroom is the aggregate root; students and attendance hang off it

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from attendance_api.models.classroom import Classroom  # noqa: F401
from attendance_api.models.student import Student  # noqa: F401
from attendance_api.models.attendance import Attendance  # noqa: F401
