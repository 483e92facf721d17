"""Password login: credential check, token issuance and session creation."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from warden_auth import InvalidCredentialsError, generate_session_id
from warden_auth.time import utc_now
from warden_identity.application.dtos import IdentityDTO, LoginResult
from warden_identity.domain.identity import Email, Identity, InvalidEmailError

if TYPE_CHECKING:
    from warden_auth import (
        JWTService,
        PasswordHashingService,
        SessionRepository,
        TokenPayload,
    )
    from warden_identity.domain.identity import IdentityRepository

logger = logging.getLogger(__name__)


class LoginService:
    """
    Application service for logging in with email and password.

    Unknown email, malformed email and wrong password all raise the same
    InvalidCredentialsError, and all three run one bcrypt verification,
    so neither the error nor the response time tells a caller which
    factor was wrong.

    A successful login returns two independent artifacts: a signed token
    (checked by signature alone) and a server-side session id (checked
    against the SessionRepository).
    """

    def __init__(  # noqa: PLR0913
        self,
        identity_repository: IdentityRepository,
        session_repository: SessionRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        session_ttl: Optional[timedelta] = None,
    ):
        self._identity_repo = identity_repository
        self._session_repo = session_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._session_ttl = (
            jwt_service.access_token_expire if session_ttl is None else session_ttl
        )

    async def login(self, email: str, password: str) -> LoginResult:
        identity = await self._find_identity(email)

        if identity is None:
            await asyncio.to_thread(self._password_service.verify_dummy, password)
            logger.info("Login failed")
            raise InvalidCredentialsError

        is_valid = await asyncio.to_thread(
            self._password_service.verify,
            password,
            identity.password_hash,
        )
        if not is_valid:
            logger.info("Login failed")
            raise InvalidCredentialsError

        token = self._jwt_service.create_access_token(
            user_id=identity.id,
            email=identity.email,
        )

        session_id = generate_session_id()
        await self._session_repo.create(
            session_id,
            identity.id,
            utc_now() + self._session_ttl,
        )

        logger.info("Identity logged in: %s", identity.email)
        return LoginResult(
            identity=IdentityDTO.from_identity(identity),
            token=token,
            session_id=session_id,
        )

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)

    async def _find_identity(self, email: str) -> Optional[Identity]:
        try:
            email_obj = Email(email)
        except InvalidEmailError:
            return None
        return await self._identity_repo.find_by_email(email_obj)
