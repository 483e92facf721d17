"""Session lookup, logout and sweep for downstream request handlers."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING
from uuid import UUID

from warden_auth import SessionData, SessionNotFoundError, generate_session_id
from warden_auth.time import utc_now
from warden_identity.application.dtos import SessionDTO

if TYPE_CHECKING:
    from warden_auth import SessionRepository
    from warden_identity.domain.identity import IdentityRepository

logger = logging.getLogger(__name__)


class SessionService:
    """Application service over stored sessions.

    Expired and absent sessions are indistinguishable to callers: the
    repository purges expired records as it reads them.
    """

    def __init__(
        self,
        session_repository: SessionRepository,
        identity_repository: IdentityRepository,
        session_ttl: timedelta,
    ):
        self._session_repo = session_repository
        self._identity_repo = identity_repository
        self._session_ttl = session_ttl

    async def open_session(
        self,
        user_id: UUID,
        ttl: timedelta | None = None,
    ) -> SessionData:
        """Create a session directly, outside of a password login.

        A zero or negative ``ttl`` yields a session that is already
        expired (diagnostics and tests).
        """
        ttl = self._session_ttl if ttl is None else ttl
        return await self._session_repo.create(
            generate_session_id(),
            user_id,
            utc_now() + ttl,
        )

    async def resolve(self, session_id: str) -> SessionDTO:
        session = await self._session_repo.find_by_session_id(session_id)
        if session is None:
            raise SessionNotFoundError

        identity = await self._identity_repo.find_by_id(session.user_id)
        return SessionDTO.from_session(
            session,
            email=identity.email if identity else None,
        )

    async def end_session(self, session_id: str) -> bool:
        removed = await self._session_repo.delete(session_id)
        if removed:
            logger.info("Session ended: %s...", session_id[:8])
        return removed

    async def purge_expired(self) -> int:
        count = await self._session_repo.delete_expired()
        logger.info("Swept %d expired sessions", count)
        return count
