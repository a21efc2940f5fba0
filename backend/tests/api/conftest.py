"""API test fixtures — FastAPI client over a seeded in-memory database.

Invariants:
    - get_db overridden to hand out sessions from the test engine
    - A fresh SessionRegistry per test, so bearer tokens never leak between tests
    - Lifespan is not run; the schema and seed data are created here
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import daybook.models  # noqa: F401
from daybook.api.dependencies import get_session_registry
from daybook.core.identity import SessionRegistry
from daybook.db.base import Base
from daybook.infrastructure.database import get_db
from daybook.infrastructure.repositories import JournalGateway
from daybook.main import app
from daybook.services.catalog_service import seed_reference_data


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
        hide_parameters=True,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        await seed_reference_data(JournalGateway(session))
    return factory


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB and session registry overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    registry = SessionRegistry()
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_registry] = lambda: registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


async def login_headers(client: AsyncClient, username: str) -> dict[str, str]:
    creds = {"username": username, "password": "password1"}
    res = await client.post("/api/v1/auth/register", json=creds)
    assert res.status_code == 201, res.text
    res = await client.post("/api/v1/auth/login", json=creds)
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
async def alice_headers(client):
    return await login_headers(client, "alice")


@pytest.fixture
async def bob_headers(client):
    return await login_headers(client, "bob")
