"""Database Session Manager: error mapping, release discipline and health check.

Tests cover:
    - SQLAlchemy exceptions inside a session map to DatabaseError by class
    - Non-database exceptions propagate unchanged
    - The pooled connection is returned on success and on failure
    - health_check reports reachability without raising
"""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError

from sample_api.core.errors import DatabaseError
from sample_api.infrastructure.database import DatabaseSessionManager, to_database_error


@pytest.fixture
async def manager(tmp_path):
    m = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'pool.db'}", pool_size=2, max_overflow=0,
    )
    yield m
    await m.close()


@pytest.mark.parametrize("raised, operation", [
    (IntegrityError("INSERT", {}, Exception("duplicate")), "commit"),
    (OperationalError("SELECT", {}, Exception("gone away")), "execute"),
    (DBAPIError("SELECT", {}, Exception("bad param")), "query"),
    (SQLAlchemyError("something else"), "unknown"),
])
async def test_sqlalchemy_errors_map_to_database_error(manager, raised, operation):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session():
            raise raised
    assert exc.value.operation == operation
    assert exc.value.__cause__ is raised


async def test_other_exceptions_propagate_unchanged(manager):
    with pytest.raises(KeyError):
        async with manager.session():
            raise KeyError("not a database problem")


async def test_connection_released_after_success_and_failure(manager):
    async with manager.session() as db:
        await db.execute(text("SELECT 1"))
    assert manager.engine.pool.checkedout() == 0

    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert manager.engine.pool.checkedout() == 0


async def test_health_check_reachable(manager):
    assert await manager.health_check() is True


async def test_health_check_unreachable(tmp_path):
    broken = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'absent' / 'dir' / 'x.db'}",
    )
    assert await broken.health_check() is False
    await broken.close()


def test_integrity_error_is_classified_before_driver_error():
    error = to_database_error(IntegrityError("INSERT", {}, Exception("duplicate")))
    assert error.operation == "commit"
    assert error.code == "DATABASE_ERROR"
    assert error.http_status == 503
