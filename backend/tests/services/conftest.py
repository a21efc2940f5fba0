"""Service test fixtures — seeded in-memory database and registered users.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the catalogue seeded
    - One AsyncSession (one JournalGateway) per test, as in a request
    - "Today" is pinned by FixedClock so streak lapse rules are deterministic

Design Decisions:
    - StaticPool: every connection sees the same in-memory database
"""

from dataclasses import dataclass
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import daybook.models  # noqa: F401
from daybook.core.credentials import MIN_ITERATIONS
from daybook.core.domain_types import UserId
from daybook.core.identity import Identity, SessionRegistry
from daybook.db.base import Base
from daybook.infrastructure.repositories import JournalGateway
from daybook.services.catalog_service import seed_reference_data
from daybook.services.entry_service import EntryService
from daybook.services.identity_service import IdentityService
from daybook.services.streak_service import StreakService


@dataclass
class FixedClock:
    today: date = date(2024, 1, 31)

    def __call__(self) -> date:
        return self.today


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
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def gateway(test_session_factory):
    async with test_session_factory() as session:
        gw = JournalGateway(session)
        await seed_reference_data(gw)
        yield gw


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def sessions():
    return SessionRegistry()


@pytest.fixture
def identity_service(gateway, sessions):
    return IdentityService(gateway, sessions, iterations=MIN_ITERATIONS)


@pytest.fixture
def streak_service(gateway, clock):
    return StreakService(gateway, clock)


@pytest.fixture
def entry_service(gateway, streak_service):
    return EntryService(gateway, streak_service)


async def _register(service: IdentityService, username: str) -> Identity:
    user = (await service.register(username, "password1")).unwrap()
    return Identity(user_id=UserId(user.id), username=user.username)


@pytest.fixture
async def alice(identity_service):
    return await _register(identity_service, "alice")


@pytest.fixture
async def bob(identity_service):
    return await _register(identity_service, "bob")


@pytest.fixture
async def moods(gateway):
    """Mood id by name."""
    return {m.name: m.id for m in await gateway.moods.find()}


@pytest.fixture
async def tags(gateway):
    """Pre-built tag id by name."""
    return {t.name: t.id for t in await gateway.tags.find()}


@pytest.fixture
async def write_entry(entry_service, moods):
    """Create an entry for `identity` on `day`; returns the entry id."""

    async def _write(identity, day, content="Some words here", primary="Happy",
                     secondary=(), tag_ids=(), title=None, category_id=None):
        result = await entry_service.create_entry(
            identity, day, title, content, category_id, moods[primary],
            [moods[name] for name in secondary], list(tag_ids),
        )
        assert result.success, result.message
        return result.value.id

    return _write
