"""Database session manager — rollback on failure and readiness check."""

import pytest
from sqlalchemy import func, select

from attendance_api.infrastructure.database import DatabaseSessionManager
from attendance_api.models.classroom import Classroom


@pytest.fixture
async def manager(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'db.sqlite'}")
    await mgr.create_schema()
    yield mgr
    await mgr.dispose()


async def _class_count(mgr: DatabaseSessionManager) -> int:
    async with mgr.session() as db:
        return (await db.execute(
            select(func.count()).select_from(Classroom),
        )).scalar_one()


async def test_session_rolls_back_and_reraises(manager):
    with pytest.raises(RuntimeError, match="handler failed"):
        async with manager.session() as db:
            db.add(Classroom(name="Physics"))
            await db.flush()
            raise RuntimeError("handler failed")

    assert await _class_count(manager) == 0


async def test_session_commit_persists(manager):
    async with manager.session() as db:
        db.add(Classroom(name="Physics"))
        await db.commit()

    assert await _class_count(manager) == 1


async def test_health_check_reports_ready(manager):
    assert await manager.health_check() is True


async def test_health_check_reports_unavailable_after_failure(manager, monkeypatch):
    async def broken_execute(self, *args, **kwargs):
        raise ConnectionError("database unreachable")

    monkeypatch.setattr("sqlalchemy.ext.asyncio.AsyncSession.execute", broken_execute)

    assert await manager.health_check() is False
