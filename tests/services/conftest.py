"""Service test fixtures: async DB, wired container, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Foreign keys are enforced (PRAGMA foreign_keys=ON on every connection)
    - The container is built with build_container exactly as in production,
      except the verifier is a FakeVerifier
    - app.state.container is installed for the client and removed afterwards

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for repository
      and route tests (PostgreSQL-specific features not exercised here)
    - Lifespan is not run by ASGITransport, so no real verifier or pool is created
"""

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from httpx import ASGITransport, AsyncClient

import app.models  # noqa: F401
from app.container import build_container
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.main import app as fastapi_app
from app.repositories.auth_repository import SqlAuthRepository
from app.repositories.report_repository import SqlReportRepository

from tests.services.fakes import FakeVerifier


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def auth_repo(db_manager):
    return SqlAuthRepository(db_manager)


@pytest.fixture
def report_repo(db_manager):
    return SqlReportRepository(db_manager)


@pytest.fixture
def verifier():
    return FakeVerifier()


@pytest.fixture
def container(db_manager, verifier):
    return build_container(db_manager, verifier)


@pytest.fixture
async def client(container):
    """FastAPI test client with the test container installed."""
    fastapi_app.state.container = container
    async with AsyncClient(
        transport=ASGITransport(app=fastapi_app), base_url="http://test",
    ) as c:
        yield c
    del fastapi_app.state.container


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
