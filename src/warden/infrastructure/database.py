"""Database engine, unit-of-work and schema helpers."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from warden_auth.persistence.sqlalchemy import AuthBase
from warden_config import Settings
from warden_identity.infrastructure.persistence.sqlalchemy import IdentityBase

logger = logging.getLogger(__name__)

_METADATA = (AuthBase.metadata, IdentityBase.metadata)


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the async engine for ``settings.database_url``."""
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@asynccontextmanager
async def session_scope(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Run one unit of work: commit on success, roll back on any error."""
    async with session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all warden tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    logger.info("Ensuring all database tables exist...")
    async with engine.begin() as conn:
        for metadata in _METADATA:
            await conn.run_sync(metadata.create_all)
    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all warden tables (USE WITH CAUTION!)."""
    logger.warning("Dropping all database tables...")
    async with engine.begin() as conn:
        for metadata in _METADATA:
            await conn.run_sync(metadata.drop_all)
    logger.info("Database tables dropped successfully")
