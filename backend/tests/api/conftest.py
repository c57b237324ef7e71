"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh file-backed SQLite database under tmp_path
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - fixed_today pins "today" for marking and default-date listings

Design Decisions:
    - File-backed SQLite over :memory: so each session has its own connection
      and rollback/commit behave like a real store
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from attendance_api.db.session import create_tables
from attendance_api.infrastructure.database import get_db, DatabaseSessionManager
from attendance_api.models.classroom import Classroom
from attendance_api.models.student import Student
import attendance_api.infrastructure.database as db_module
from attendance_api.main import app

FIXED_TODAY = "2026-03-02"


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'attendance.db'}", echo=False,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def count_rows(test_session_factory):
    """Count rows of a model (optionally filtered) in a fresh session."""
    async def _count(model, *criteria) -> int:
        stmt = select(func.count()).select_from(model)
        if criteria:
            stmt = stmt.where(*criteria)
        async with test_session_factory() as session:
            return (await session.execute(stmt)).scalar_one()
    return _count


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin the server-local day used by marking and default listings."""
    monkeypatch.setattr(
        "attendance_api.api.routes.attendance.today_iso", lambda: FIXED_TODAY,
    )
    monkeypatch.setattr(
        "attendance_api.core.attendance_day.today_iso", lambda: FIXED_TODAY,
    )
    return FIXED_TODAY


@pytest.fixture
async def seed_class(test_db):
    classroom = Classroom(name="Physics 101")
    test_db.add(classroom)
    await test_db.commit()
    await test_db.refresh(classroom)
    return classroom


@pytest.fixture
async def seed_students(test_db, seed_class):
    """Two students in seed_class: A001 Ada, B002 Ben."""
    students = [
        Student(unique_number="A001", name="Ada", class_id=seed_class.id),
        Student(unique_number="B002", name="Ben", class_id=seed_class.id),
    ]
    test_db.add_all(students)
    await test_db.commit()
    for s in students:
        await test_db.refresh(s)
    return students
