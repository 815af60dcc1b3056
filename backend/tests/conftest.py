"""Shared fixtures.

Environment variables are set before the application is imported so that
``Settings()`` never points at a production database.
"""

import os
from datetime import datetime, timedelta, timezone

os.environ.update({
    "DATABASE_URL": "sqlite+aiosqlite://",
    "REPOSITORY_BACKEND": "sql",
    "CREATE_TABLES": "false",
})

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from main import app
from shared.dependencies import (
    get_access_code_generator,
    get_clock,
    get_db,
    get_id_generator,
    get_memory_repositories,
)
from shared.infrastructure.database import create_tables
from shared.infrastructure.repository_factory import create_repositories

T0 = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, initial: datetime = T0):
        self.current = initial

    def now(self) -> datetime:
        return self.current

    def set_time(self, value: datetime) -> None:
        self.current = value

    def tick(self, seconds: float) -> None:
        self.current = self.current + timedelta(seconds=seconds)


class FakeIdGenerator:
    def __init__(self):
        self.sequence = 1

    def generate(self) -> str:
        value = f"test-id-{self.sequence:03d}"
        self.sequence += 1
        return value


class FakeAccessCodeGenerator:
    """Yields AC000001, AC000002, ... unless codes were forced."""

    def __init__(self):
        self.sequence = 1
        self.forced: list[str] = []
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        if self.forced:
            return self.forced.pop(0)
        value = f"AC{self.sequence:06d}"
        self.sequence += 1
        return value

    def force_next_codes(self, codes: list[str]) -> None:
        self.forced = list(codes)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def id_generator():
    return FakeIdGenerator()


@pytest.fixture
def code_generator():
    return FakeAccessCodeGenerator()


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture(params=["memory", "sql"])
async def repositories(request, session_factory):
    """Run the test once per repository backend."""
    if request.param == "memory":
        yield create_repositories("memory")
    else:
        async with session_factory() as session:
            yield create_repositories("sql", session)


@pytest.fixture
def override_dependencies(session_factory, clock, id_generator, code_generator):
    async def _override_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_db
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_id_generator] = lambda: id_generator
    app.dependency_overrides[get_access_code_generator] = lambda: code_generator
    get_memory_repositories.cache_clear()
    yield
    app.dependency_overrides.clear()
    get_memory_repositories.cache_clear()


@pytest.fixture
async def client(override_dependencies):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
