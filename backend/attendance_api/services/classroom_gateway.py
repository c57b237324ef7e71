"""Classroom Gateway — typed create/find/upsert operations over classes, students, attendance.

Invariants:
    - import_roster applies every upsert in one transaction (commit all or roll back all)
    - Upserts use the store's INSERT .. ON CONFLICT DO UPDATE, keyed on the
      table's unique constraint, so concurrent writers never duplicate rows
    - Present/absent queries are scoped to a single class and day

Design Decisions:
    - Dialect-specific insert() chosen from the session's bind: PostgreSQL in
      production, SQLite for local runs and tests
    - List queries return ORM rows in store order (no ORDER BY)
"""

import logging

from sqlalchemy import and_, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from attendance_api.core.domain_types import (
    AttendanceDate, AttendanceStatus, ClassId, RosterEntry, StudentId,
)
from attendance_api.core.errors import DatabaseError
from attendance_api.models.attendance import Attendance
from attendance_api.models.classroom import Classroom
from attendance_api.models.student import Student

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def student_upsert(dialect: str, class_id: ClassId, entry: RosterEntry):
    """INSERT a student or refresh its name when (unique_number, class_id) exists."""
    stmt = _insert_for(dialect)(Student).values(
        unique_number=entry.unique_number,
        name=entry.name,
        class_id=class_id,
    )
    return stmt.on_conflict_do_update(
        index_elements=["unique_number", "class_id"],
        set_={"name": stmt.excluded.name},
    )


def attendance_upsert(
    dialect: str, student_id: StudentId, day: AttendanceDate, status: AttendanceStatus,
):
    """INSERT an attendance mark or overwrite its status for the same day."""
    stmt = _insert_for(dialect)(Attendance).values(
        student_id=student_id, date=day, status=status.value,
    )
    return stmt.on_conflict_do_update(
        index_elements=["student_id", "date"],
        set_={"status": stmt.excluded.status},
    )


def _insert_for(dialect: str):
    try:
        return _UPSERT_INSERTS[dialect]
    except KeyError:
        logger.error(f"No ON CONFLICT insert for dialect {dialect!r}")
        raise DatabaseError("statement not supported by the store", "upsert")


class ClassroomGateway:
    """Persistence operations used by the classroom and attendance routes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def dialect(self) -> str:
        return self.db.get_bind().dialect.name

    # ─── Classes ────────────────────────────────────────────────

    async def create_class(self, name: str) -> Classroom:
        classroom = Classroom(name=name)
        self.db.add(classroom)
        await self.db.commit()
        await self.db.refresh(classroom)
        return classroom

    async def get_class(self, class_id: ClassId) -> Classroom | None:
        return await self.db.get(Classroom, class_id)

    # ─── Students ───────────────────────────────────────────────

    async def import_roster(
        self, class_id: ClassId, entries: list[RosterEntry],
    ) -> int:
        """Upsert all entries atomically. Returns the number of entries applied."""
        dialect = self.dialect
        try:
            for entry in entries:
                await self.db.execute(student_upsert(dialect, class_id, entry))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return len(entries)

    async def find_student(
        self, class_id: ClassId, unique_number: str,
    ) -> Student | None:
        result = await self.db.execute(
            select(Student)
            .where(Student.class_id == class_id)
            .where(Student.unique_number == unique_number)
        )
        return result.scalar_one_or_none()

    # ─── Attendance ─────────────────────────────────────────────

    async def mark_present(self, student_id: StudentId, day: AttendanceDate) -> None:
        await self.db.execute(
            attendance_upsert(
                self.dialect, student_id, day, AttendanceStatus.PRESENT,
            ),
        )
        await self.db.commit()

    async def list_present(
        self, class_id: ClassId, day: AttendanceDate,
    ) -> list[Student]:
        """Students of the class with a Present mark on the day."""
        result = await self.db.execute(
            select(Student)
            .where(Student.class_id == class_id)
            .where(Student.attendances.any(_present_on(day)))
        )
        return list(result.scalars().all())

    async def list_absent(
        self, class_id: ClassId, day: AttendanceDate,
    ) -> list[Student]:
        """Students of the class without a Present mark on the day."""
        result = await self.db.execute(
            select(Student)
            .where(Student.class_id == class_id)
            .where(~Student.attendances.any(_present_on(day)))
        )
        return list(result.scalars().all())


def _present_on(day: AttendanceDate):
    return and_(
        Attendance.date == day,
        Attendance.status == AttendanceStatus.PRESENT.value,
    )
