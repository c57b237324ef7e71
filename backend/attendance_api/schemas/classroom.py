"""Classroom Schemas — class creation and roster import payloads.

Invariants:
    - ClassCreate.class_name: stripped, non-empty, at most 255 chars
"""

from pydantic import BaseModel, Field, field_validator


class ClassCreate(BaseModel):
    """Class creation — rejects missing or whitespace-only names."""
    class_name: str = Field(min_length=1, max_length=255)

    @field_validator("class_name")
    @classmethod
    def strip_class_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Class name is required")
        return v


class ClassCreated(BaseModel):
    message: str = "Class created"
    class_id: int


class RosterImported(BaseModel):
    message: str = "Users imported"
    total_users: int
