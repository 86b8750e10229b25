"""Integration-test fixtures.

All integration tests share a single event-loop so that the module-level
SQLAlchemy async engine pool (created at import time) remains valid across
the entire test session.

Pre-condition: a running PostgreSQL with `alembic upgrade head` applied.
Tests are skipped when the database cannot be reached.
"""

import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.fm_common.database import async_session_factory, engine
from src.fm_profile.infrastructure.db_models import ContractORM, JobORM, ProfileORM
from src.main import app


@dataclass
class Scenario:
    """Fresh rows created for one test: one client, one contractor, one contract."""

    client_id: int
    contractor_id: int
    contract_id: int
    job_ids: list[int]


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncClient:  # type: ignore[override]
    """Session-scoped async HTTP client — keeps the engine pool alive."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (OSError, SQLAlchemyError) as exc:
        pytest.skip(f"PostgreSQL not reachable: {exc}")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(loop_scope="session")
async def make_scenario(
    client: AsyncClient,
) -> Callable[..., Awaitable[Scenario]]:
    """Factory that inserts an isolated client/contractor pair with jobs.

    Each call uses unique names so repeated runs never collide with seed data.
    """

    async def _make(
        client_balance_cents: int = 0,
        job_prices: tuple[int, ...] = (20000,),
        contract_status: str = "in_progress",
    ) -> Scenario:
        tag = uuid.uuid4().hex[:8]
        async with async_session_factory() as session:
            buyer = ProfileORM(
                first_name="Client",
                last_name=tag,
                profession="Tester",
                type="client",
                balance_cents=client_balance_cents,
            )
            seller = ProfileORM(
                first_name="Contractor",
                last_name=tag,
                profession=f"Profession-{tag}",
                type="contractor",
                balance_cents=0,
            )
            session.add_all([buyer, seller])
            await session.flush()
            contract = ContractORM(
                terms=f"Integration contract {tag}",
                status=contract_status,
                client_id=buyer.id,
                contractor_id=seller.id,
            )
            session.add(contract)
            await session.flush()
            jobs = [
                JobORM(description=f"job {i} {tag}", price_cents=price, contract_id=contract.id)
                for i, price in enumerate(job_prices)
            ]
            session.add_all(jobs)
            await session.flush()
            scenario = Scenario(
                client_id=buyer.id,
                contractor_id=seller.id,
                contract_id=contract.id,
                job_ids=[j.id for j in jobs],
            )
            await session.commit()
        return scenario

    return _make


@pytest.fixture
def read_balance() -> Callable[[int], Awaitable[int]]:
    """Read a balance straight from the database, bypassing the API."""

    async def _read(profile_id: int) -> int:
        async with async_session_factory() as session:
            result = await session.execute(
                text("SELECT balance_cents FROM profiles WHERE id = :id"), {"id": profile_id}
            )
            return int(result.scalar_one())

    return _read
