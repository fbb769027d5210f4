"""Integration test setup.

Integration tests run against the PostgreSQL instance named by
``DATABASE__URL``. The schema is created if missing; every test writes
rows under fresh ids, so no cleanup is needed between tests.
"""

import asyncio

import pytest
from sqlalchemy.exc import SQLAlchemyError

from humor.config import Settings
from humor.persistence.database import create_engine
from humor.persistence.tables import metadata


async def _prepare_schema(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    finally:
        await engine.dispose()


@pytest.fixture(scope="session", autouse=True)
def database_ready() -> None:
    """Skip integration tests when PostgreSQL can't be reached."""
    settings = Settings()
    try:
        asyncio.run(asyncio.wait_for(_prepare_schema(settings), timeout=10))
    except (OSError, SQLAlchemyError, TimeoutError) as e:
        pytest.skip(f"PostgreSQL unavailable at {settings.database_url}: {e}")
