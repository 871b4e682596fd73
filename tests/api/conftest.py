"""API test fixtures: pooled SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh file-backed SQLite database in tmp_path
    - The manager is a real DatabaseSessionManager with a fixed 5-connection pool
    - app.state.db_manager is swapped in for the test and restored afterwards

Design Decisions:
    - File database over :memory: so pooled connections share one store
    - Lifespan is not run by ASGITransport; the fixture plays its role
"""

from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

import sample_api.models  # noqa: F401
from sample_api.db.base import Base
from sample_api.infrastructure.database import DatabaseSessionManager
from sample_api.main import app
from sample_api.models.agent import Agent
from sample_api.models.company import Company
from sample_api.models.customer import Customer

POOL_SIZE = 5


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'sample.db'}",
        pool_size=POOL_SIZE,
        max_overflow=0,
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the test pool."""
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = original_manager


@pytest.fixture
async def seed_company(db_manager):
    """Insert one company directly and return it."""
    async with db_manager.session() as db:
        company = Company(company_name="Acme Corp", company_city="Boston")
        db.add(company)
        await db.commit()
        await db.refresh(company)
    return company


@pytest.fixture
async def seed_agents_and_customers(db_manager):
    async with db_manager.session() as db:
        db.add_all([
            Agent(
                agent_code="A001", agent_name="Subbarao", working_area="Bangalore",
                commission=Decimal("0.14"), phone_no="077-12346674", country="",
            ),
            Agent(
                agent_code="A002", agent_name="Mukesh", working_area="Mumbai",
                commission=Decimal("0.11"), phone_no="029-12358964", country="",
            ),
        ])
        await db.flush()
        db.add(Customer(
            cust_code="C00013", cust_name="Holmes", cust_city="London",
            working_area="London", cust_country="UK", grade=2,
            opening_amt=6000, receive_amt=5000, payment_amt=7000,
            outstanding_amt=4000, phone_no="BBBBBBB", agent_code="A002",
        ))
        await db.commit()


@pytest.fixture
def read_companies(db_manager):
    """Return an async reader of (id, name, city) tuples, in a fresh session each call."""
    async def _read() -> list[tuple[int, str, str]]:
        async with db_manager.session() as db:
            result = await db.execute(
                select(Company).order_by(Company.company_id),
            )
            return [
                (c.company_id, c.company_name, c.company_city)
                for c in result.scalars().all()
            ]
    return _read


@pytest.fixture
def count_companies(db_manager):
    async def _count() -> int:
        async with db_manager.session() as db:
            result = await db.execute(select(func.count()).select_from(Company))
            return result.scalar_one()
    return _count
