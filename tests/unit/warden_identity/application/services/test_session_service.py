"""Unit tests for SessionService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from warden_auth import SessionNotFoundError
from warden_auth.persistence.memory import InMemorySessionRepository
from warden_identity import Email, NewIdentity, SessionService
from warden_identity.infrastructure.persistence.memory import InMemoryIdentityRepository


class TestSessionService:
    """Tests for session lookup, logout and sweep."""

    def setup_method(self):
        """Set up test fixtures."""
        self.session_repo = InMemorySessionRepository()
        self.identity_repo = InMemoryIdentityRepository()
        self.service = SessionService(
            session_repository=self.session_repo,
            identity_repository=self.identity_repo,
            session_ttl=timedelta(hours=1),
        )

    async def _identity(self):
        return await self.identity_repo.save(
            NewIdentity(email=Email("user@example.com"), password_hash="hash"),
        )

    @pytest.mark.asyncio
    async def test_resolve_live_session(self):
        identity = await self._identity()
        session = await self.service.open_session(identity.id)

        resolved = await self.service.resolve(session.session_id)

        assert resolved.user_id == identity.id
        assert resolved.email == "user@example.com"
        assert resolved.expires_at == session.expires_at

    @pytest.mark.asyncio
    async def test_resolve_unknown_session(self):
        with pytest.raises(SessionNotFoundError):
            await self.service.resolve("no-such-session")

    @pytest.mark.asyncio
    async def test_expired_session_resolves_as_not_found(self):
        identity = await self._identity()
        session = await self.service.open_session(identity.id, ttl=timedelta(0))

        with pytest.raises(SessionNotFoundError):
            await self.service.resolve(session.session_id)
        assert len(self.session_repo) == 0

    @pytest.mark.asyncio
    async def test_resolve_after_identity_deleted(self):
        identity = await self._identity()
        session = await self.service.open_session(identity.id)
        await self.identity_repo.delete(identity.id)

        resolved = await self.service.resolve(session.session_id)

        assert resolved.user_id == identity.id
        assert resolved.email is None

    @pytest.mark.asyncio
    async def test_end_session(self):
        session = await self.service.open_session(uuid4())

        assert await self.service.end_session(session.session_id) is True
        assert await self.service.end_session(session.session_id) is False
        with pytest.raises(SessionNotFoundError):
            await self.service.resolve(session.session_id)

    @pytest.mark.asyncio
    async def test_purge_expired(self):
        user_id = uuid4()
        await self.service.open_session(user_id, ttl=timedelta(seconds=-5))
        await self.service.open_session(user_id, ttl=timedelta(seconds=-1))
        live = await self.service.open_session(user_id)

        assert await self.service.purge_expired() == 2
        assert (await self.service.resolve(live.session_id)).session_id == live.session_id
