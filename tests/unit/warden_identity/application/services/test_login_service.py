"""Unit tests for LoginService."""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from warden_auth import InvalidCredentialsError, JWTService, PasswordHashingService
from warden_auth.persistence.memory import InMemorySessionRepository
from warden_auth.time import utc_now
from warden_identity import LoginService, RegistrationService
from warden_identity.infrastructure.persistence.memory import InMemoryIdentityRepository

SECRET = "login-test-secret-0123456789-abcdefghijkl"


class TestLoginService:
    """Tests for password login."""

    def setup_method(self):
        """Set up test fixtures."""
        self.identity_repo = InMemoryIdentityRepository()
        self.session_repo = InMemorySessionRepository()
        self.password_service = PasswordHashingService(rounds=4)
        self.jwt_service = JWTService(secret_key=SECRET)
        self.registration = RegistrationService(self.identity_repo, self.password_service)
        self.service = LoginService(
            identity_repository=self.identity_repo,
            session_repository=self.session_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
            session_ttl=timedelta(minutes=30),
        )

    @pytest.mark.asyncio
    async def test_login_returns_token_and_session(self):
        registered = await self.registration.register("user@example.com", "password123")

        result = await self.service.login("user@example.com", "password123")

        assert result.identity == registered
        payload = self.service.verify_token(result.token)
        assert payload.user_id == registered.id
        assert payload.email == "user@example.com"

        session = await self.session_repo.find_by_session_id(result.session_id)
        assert session is not None
        assert session.user_id == registered.id

    @pytest.mark.asyncio
    async def test_session_uses_configured_ttl(self):
        await self.registration.register("user@example.com", "password123")
        before = utc_now()

        result = await self.service.login("user@example.com", "password123")

        session = await self.session_repo.find_by_session_id(result.session_id)
        assert before + timedelta(minutes=30) <= session.expires_at
        assert session.expires_at <= utc_now() + timedelta(minutes=30)

    @pytest.mark.asyncio
    async def test_login_is_case_insensitive_on_email(self):
        await self.registration.register("user@example.com", "password123")

        result = await self.service.login("USER@Example.com", "password123")

        assert result.identity.email == "user@example.com"

    @pytest.mark.asyncio
    async def test_each_login_opens_a_new_session(self):
        await self.registration.register("user@example.com", "password123")

        first = await self.service.login("user@example.com", "password123")
        second = await self.service.login("user@example.com", "password123")

        assert first.session_id != second.session_id
        assert len(self.session_repo) == 2

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self):
        await self.registration.register("user@example.com", "password123")

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await self.service.login("user@example.com", "wrong-password")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await self.service.login("nobody@example.com", "password123")

        assert wrong_password.value.kind is unknown_email.value.kind
        assert wrong_password.value.message == unknown_email.value.message
        assert len(self.session_repo) == 0

    @pytest.mark.asyncio
    async def test_malformed_email_is_invalid_credentials(self):
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("not-an-email", "password123")


class TestLoginTimingEqualisation:
    """Every failure path pays for one bcrypt verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.verify.return_value = False
        self.password_service.verify_dummy.return_value = False
        self.service = LoginService(
            identity_repository=InMemoryIdentityRepository(),
            session_repository=InMemorySessionRepository(),
            password_service=self.password_service,
            jwt_service=JWTService(secret_key=SECRET),
        )

    @pytest.mark.asyncio
    async def test_unknown_email_runs_dummy_verification(self):
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("nobody@example.com", "password123")

        self.password_service.verify_dummy.assert_called_once_with("password123")

    @pytest.mark.asyncio
    async def test_malformed_email_runs_dummy_verification(self):
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("garbage", "password123")

        self.password_service.verify_dummy.assert_called_once_with("password123")


class TestLoginSessionTtlDefault:
    def test_defaults_to_token_lifetime(self):
        jwt_service = JWTService(secret_key=SECRET, access_token_expire=timedelta(minutes=5))
        service = LoginService(
            identity_repository=InMemoryIdentityRepository(),
            session_repository=InMemorySessionRepository(),
            password_service=PasswordHashingService(rounds=4),
            jwt_service=jwt_service,
        )

        assert service._session_ttl == timedelta(minutes=5)
