"""Initial schema — classes, students, attendance.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "classes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "students",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("unique_number", sa.String(100), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("class_id", sa.Integer, sa.ForeignKey("classes.id"), nullable=False),
        sa.UniqueConstraint(
            "unique_number", "class_id", name="uq_students_unique_number_class",
        ),
    )
    op.create_index("ix_students_class_id", "students", ["class_id"])

    op.create_table(
        "attendance",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("student_id", sa.Integer, sa.ForeignKey("students.id"), nullable=False),
        sa.Column("date", sa.String(10), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Present"),
        sa.UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),
    )


def downgrade() -> None:
    op.drop_table("attendance")
    op.drop_index("ix_students_class_id", table_name="students")
    op.drop_table("students")
    op.drop_table("classes")
