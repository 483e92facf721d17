"""Abstract repository interface for server-side sessions.

Sessions expire purely by time. There is no state column: a record is
valid while ``now < expires_at`` and is purged either lazily, when a read
finds it expired, or in bulk by ``delete_expired``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SessionData:
    """Immutable session data returned by repository."""

    session_id: str
    user_id: UUID
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check if the session has expired."""
        return self.expires_at <= now


class SessionRepository(ABC):
    """
    Abstract repository interface for session records.

    Every operation must be individually atomic and safe to call from
    concurrent in-flight requests.
    """

    @abstractmethod
    async def create(
        self,
        session_id: str,
        user_id: UUID,
        expires_at: datetime,
    ) -> SessionData:
        """
        Store a new session.

        Parameters
        ----------
        session_id
            Opaque, unguessable session identifier
        user_id
            The owning identity (weak reference, no cascade)
        expires_at
            When the session stops being valid

        Returns
        -------
        The stored session, with ``created_at`` set to now

        Raises
        ------
        DuplicateSessionError
            If ``session_id`` is already stored
        """

    @abstractmethod
    async def find_by_session_id(self, session_id: str) -> SessionData | None:
        """
        Find a live session.

        If the record exists but ``expires_at <= now`` it is removed as
        part of the read and None is returned.

        Parameters
        ----------
        session_id
            The session identifier

        Returns
        -------
        Session data if found and unexpired, None otherwise
        """

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """
        Delete a session.

        Parameters
        ----------
        session_id
            The session identifier

        Returns
        -------
        True if a record existed and was removed, False otherwise
        """

    @abstractmethod
    async def delete_expired(self) -> int:
        """
        Remove every session with ``expires_at <= now``.

        Returns
        -------
        Number of sessions deleted
        """
