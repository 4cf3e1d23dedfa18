"""Service test fixtures — async SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh file-backed SQLite database under tmp_path
    - The DatabaseSessionManager under test is the production class (FK pragma, error mapping)
    - get_db_manager / get_view_cache overridden for route tests
    - db_manager module singleton patched for the readiness probe

Design Decisions:
    - File-backed SQLite rather than :memory: so concurrent card sub-queries
      get separate pooled connections to the same database
    - Fixture rows inserted through seed_database (bcrypt rounds kept at the minimum)
"""

import datetime

import pytest
from httpx import ASGITransport, AsyncClient

import invoicing.infrastructure.database as db_module
import invoicing.models  # noqa: F401
from invoicing.db.base import Base
from invoicing.infrastructure.database import DatabaseSessionManager, get_db_manager
from invoicing.infrastructure.view_cache import ViewCache, get_view_cache
from invoicing.main import app
from invoicing.seed import seed_database
from tests.services.fixture_data import CUSTOMERS, INVOICES, REVENUE, USERS, RecordingViews


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'invoicing.db'}",
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
async def empty_db_manager(tmp_path):
    """Manager over a database with no tables: every statement fails."""
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}",
    )
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
async def seeded(db_manager):
    async with db_manager.session("seed") as session:
        await seed_database(
            session, users=USERS, customers=CUSTOMERS,
            invoices=INVOICES, revenue=REVENUE, bcrypt_rounds=4,
        )
    return db_manager


@pytest.fixture
async def many_invoices(seeded):
    """Thirteen extra 2023 invoices for C2: seventeen rows in total."""
    extra = [
        {
            "id": f"X{n:02d}",
            "customer_id": "C2",
            "amount": 100 * n,
            "status": "paid" if n % 2 else "pending",
            "date": datetime.date(2023, 1, 1) + datetime.timedelta(days=n),
        }
        for n in range(1, 14)
    ]
    async with seeded.session("seed") as session:
        await seed_database(
            session, users=[], customers=[], invoices=extra, revenue=[],
        )
    return seeded


@pytest.fixture
def views():
    return RecordingViews()


@pytest.fixture
async def client(seeded):
    """FastAPI test client with the DB manager and view cache overridden."""
    cache = ViewCache()
    app.dependency_overrides[get_db_manager] = lambda: seeded
    app.dependency_overrides[get_view_cache] = lambda: cache

    original_manager = db_module.db_manager
    db_module.db_manager = seeded

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
