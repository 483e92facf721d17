"""SQLAlchemy implementation of SessionRepository.

Atomicity comes from the database: inserts rely on the primary key to
reject duplicate ids, and both expiry paths are single conditional
DELETE statements.
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from warden_auth.exceptions import DuplicateSessionError
from warden_auth.persistence.sqlalchemy.models import SessionModel
from warden_auth.repositories import SessionData, SessionRepository
from warden_auth.time import ensure_tz_aware, utc_now

logger = logging.getLogger(__name__)


class SessionRepositorySQLAlchemy(SessionRepository):
    """
    SQLAlchemy implementation of SessionRepository.

    The repository only flushes; committing is the caller's unit of work.
    """

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session
        """
        self._session = session

    def _to_data(self, model: SessionModel) -> SessionData:
        """Map SQLAlchemy model to session data."""
        return SessionData(
            session_id=model.session_id,
            user_id=model.user_id,
            created_at=ensure_tz_aware(model.created_at),
            expires_at=ensure_tz_aware(model.expires_at),
        )

    async def create(
        self,
        session_id: str,
        user_id: UUID,
        expires_at: datetime,
    ) -> SessionData:
        created_at = utc_now()
        stmt = insert(SessionModel).values(
            session_id=session_id,
            user_id=user_id,
            created_at=created_at,
            expires_at=expires_at,
        )
        try:
            await self._session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateSessionError from e

        logger.debug("Created session %s... for user %s", session_id[:8], user_id)
        return SessionData(
            session_id=session_id,
            user_id=user_id,
            created_at=created_at,
            expires_at=ensure_tz_aware(expires_at),
        )

    async def find_by_session_id(self, session_id: str) -> SessionData | None:
        stmt = select(SessionModel).where(SessionModel.session_id == session_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None

        data = self._to_data(model)
        now = utc_now()
        if not data.is_expired(now):
            return data

        purge = (
            delete(SessionModel)
            .where(
                SessionModel.session_id == session_id,
                SessionModel.expires_at <= now,
            )
            .execution_options(synchronize_session=False)
        )
        await self._session.execute(purge)
        self._session.expunge(model)
        logger.debug("Purged expired session on read: %s...", session_id[:8])
        return None

    async def delete(self, session_id: str) -> bool:
        stmt = (
            delete(SessionModel)
            .where(SessionModel.session_id == session_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete_expired(self) -> int:
        stmt = (
            delete(SessionModel)
            .where(SessionModel.expires_at <= utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        count = result.rowcount or 0
        if count:
            logger.info("Deleted %d expired sessions", count)
        return count
