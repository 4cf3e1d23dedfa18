"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Uses the same engine construction as DatabaseSessionManager
    - Meant for the seed script and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: a convenience for non-FastAPI contexts
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from invoicing.infrastructure.database import build_engine


def create_session_factory(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an engine and async session factory for the given database URL."""
    engine = build_engine(database_url)
    return engine, async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
