"""In-process implementation of SessionRepository.

Intended for tests, demos and single-process deployments. State lives in
a dict guarded by an asyncio.Lock; no critical section awaits, so each
operation is atomic with respect to other coroutines.
"""

import asyncio
import logging
from datetime import datetime
from uuid import UUID

from warden_auth.exceptions import DuplicateSessionError
from warden_auth.repositories import SessionData, SessionRepository
from warden_auth.time import ensure_tz_aware, utc_now

logger = logging.getLogger(__name__)


class InMemorySessionRepository(SessionRepository):
    """Dict-backed session store with lazy expiry."""

    def __init__(self) -> None:
        self._sessions: dict[str, SessionData] = {}
        self._lock = asyncio.Lock()

    async def create(
        self,
        session_id: str,
        user_id: UUID,
        expires_at: datetime,
    ) -> SessionData:
        session = SessionData(
            session_id=session_id,
            user_id=user_id,
            created_at=utc_now(),
            expires_at=ensure_tz_aware(expires_at),
        )
        async with self._lock:
            if session_id in self._sessions:
                raise DuplicateSessionError
            self._sessions[session_id] = session
        return session

    async def find_by_session_id(self, session_id: str) -> SessionData | None:
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if session.is_expired(utc_now()):
                del self._sessions[session_id]
                logger.debug("Purged expired session on read: %s...", session_id[:8])
                return None
            return session

    async def delete(self, session_id: str) -> bool:
        async with self._lock:
            return self._sessions.pop(session_id, None) is not None

    async def delete_expired(self) -> int:
        now = utc_now()
        async with self._lock:
            expired = [
                sid for sid, session in self._sessions.items() if session.is_expired(now)
            ]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)
