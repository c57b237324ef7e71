"""Class Routes — create classes and bulk-import rosters from CSV.

Invariants:
    - Import checks the class (404) before looking at the upload (400);
      a text field named "file" is accepted by the route and rejected here
    - class_id path values outside the primary key range are a 400
    - Roster rows are deduplicated by unique_number before any write
    - All student upserts of one import commit together or not at all
    - get_class_or_404 exported for reuse by the attendance routes
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Path, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from attendance_api.api.routes.failure_boundary import failure_boundary
from attendance_api.core.domain_types import MAX_ROW_ID, ClassId
from attendance_api.core.errors import (
    ErrorContext, InvalidInputError, ResourceNotFoundError,
)
from attendance_api.core.roster_csv import read_roster
from attendance_api.infrastructure.database import get_db
from attendance_api.models.classroom import Classroom
from attendance_api.schemas.classroom import (
    ClassCreate, ClassCreated, RosterImported,
)
from attendance_api.services.classroom_gateway import ClassroomGateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/classes", tags=["classes"])

ClassIdParam = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


def get_gateway(db: AsyncSession = Depends(get_db)) -> ClassroomGateway:
    return ClassroomGateway(db)


async def get_class_or_404(
    class_id: int, gateway: ClassroomGateway,
) -> Classroom:
    """Get class or raise 404. Exported for the attendance routes."""
    classroom = await gateway.get_class(ClassId(class_id))
    if not classroom:
        raise ResourceNotFoundError(
            "Class", str(class_id), ErrorContext(class_id=class_id),
        )
    return classroom


@router.post(
    "", response_model=ClassCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_class(
    body: ClassCreate, gateway: ClassroomGateway = Depends(get_gateway),
):
    """Create a new class."""
    with failure_boundary("Failed to create class"):
        classroom = await gateway.create_class(body.class_name)
    logger.info(
        f"Class created: {classroom.name}", extra={"class_id": classroom.id},
    )
    return ClassCreated(class_id=classroom.id)


@router.post("/{class_id}/import", response_model=RosterImported)
async def import_students(
    class_id: ClassIdParam,
    file: UploadFile | str | None = File(None),
    gateway: ClassroomGateway = Depends(get_gateway),
):
    """Import (upsert) students from a CSV with unique_number,name columns."""
    with failure_boundary("Failed to import users", class_id):
        await get_class_or_404(class_id, gateway)
        if file is None or isinstance(file, str):
            raise InvalidInputError("CSV file is required", "file")
        entries = read_roster(await file.read())
        total_users = await gateway.import_roster(ClassId(class_id), entries)
    logger.info(
        "Roster imported",
        extra={"class_id": class_id, "total_users": total_users},
    )
    return RosterImported(total_users=total_users)
