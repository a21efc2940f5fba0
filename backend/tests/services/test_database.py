"""Database session manager — error translation and readiness probe."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from daybook.core.errors import DatabaseError
from daybook.infrastructure.database import DatabaseSessionManager, to_database_error


@pytest.mark.parametrize("exc,operation", [
    (IntegrityError("INSERT", {}, Exception("unique")), "commit"),
    (OperationalError("SELECT", {}, Exception("locked")), "execute"),
    (SQLAlchemyError("boom"), "unknown"),
])
def test_to_database_error_picks_most_specific(exc, operation):
    error = to_database_error(exc)
    assert error.operation == operation
    assert error.http_status == 503


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_health_check_true_for_reachable_database(manager):
    assert await manager.health_check() is True


async def test_session_translates_sqlalchemy_errors(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session():
            raise IntegrityError("INSERT", {}, Exception("unique"))
    assert exc.value.operation == "commit"


async def test_session_leaves_other_errors_alone(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not a database problem")


async def test_engine_hides_bound_parameters(manager):
    assert manager.engine.sync_engine.hide_parameters is True
