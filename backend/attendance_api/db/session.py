"""Schema helpers for engines created outside FastAPI (startup, test fixtures).

Invariants:
    - Tables are created from Base.metadata (all models registered on import)
    - Alembic remains the migration path for managed databases
"""

from sqlalchemy.ext.asyncio import AsyncEngine

import attendance_api.models  # noqa: F401
from attendance_api.db.base import Base


async def create_tables(engine: AsyncEngine) -> None:
    """Create any missing tables (no-op for tables that already exist)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
