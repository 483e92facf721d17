"""Fixtures for SQLite-backed integration tests."""

import pytest
import pytest_asyncio

from warden.infrastructure import (
    create_engine,
    create_session_maker,
    create_tables,
)
from warden_config import Settings


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Async engine over a fresh SQLite file with the schema created."""
    settings = Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'warden.db'}",
    )
    engine = create_engine(settings)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session
