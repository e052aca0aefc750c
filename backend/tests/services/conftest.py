"""Service test fixtures - ledger stores + FastAPI test clients.

Invariants:
    - Every test gets a fresh InMemoryLedgerStore and a fresh in-memory SQLite database
    - get_ledger_store dependency overridden per client; the module singleton is never touched

Design Decisions:
    - SQLite in-memory for SqlLedgerStore: fast, no external dependency, LargeBinary keys behave
      the same as PostgreSQL bytea for point reads and writes
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from ngo_ledger.db.base import Base
from ngo_ledger.infrastructure.ledger_store import (
    InMemoryLedgerStore, SqlLedgerStore, get_ledger_store,
)
from ngo_ledger.main import app
import ngo_ledger.models  # noqa: F401


@pytest.fixture
def store():
    return InMemoryLedgerStore()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
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
async def sql_store(test_db):
    return SqlLedgerStore(test_db)


@pytest.fixture
async def client(store):
    """FastAPI test client backed by the per-test in-memory store."""
    async def override_get_ledger_store():
        yield store

    app.dependency_overrides[get_ledger_store] = override_get_ledger_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def sql_client(test_session_factory):
    """FastAPI test client backed by SqlLedgerStore, one session per request."""
    async def override_get_ledger_store():
        async with test_session_factory() as session:
            yield SqlLedgerStore(session)

    app.dependency_overrides[get_ledger_store] = override_get_ledger_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
