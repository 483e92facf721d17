"""Registration of new identities."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from warden_identity.application.dtos import IdentityDTO
from warden_identity.domain.identity import (
    Email,
    EmailAlreadyExistsError,
    NewIdentity,
)

if TYPE_CHECKING:
    from warden_auth import PasswordHashingService
    from warden_identity.domain.identity import IdentityRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    """
    Application service for creating identities.

    Steps run strictly in order and nothing is written until every
    check has passed:
    1. email shape
    2. password length
    3. email uniqueness
    4. hash, then persist

    The uniqueness check in step 3 is only a fast path that avoids paying
    for bcrypt on doomed requests. The repository's atomic
    insert-if-absent is what rejects a duplicate that slips in between
    the check and the insert.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        password_service: PasswordHashingService,
    ):
        self._identity_repo = identity_repository
        self._password_service = password_service

    async def register(self, email: str, password: str) -> IdentityDTO:
        email_obj = Email(email)
        self._password_service.validate_strength(password)

        existing = await self._identity_repo.find_by_email(email_obj)
        if existing is not None:
            raise EmailAlreadyExistsError(email_obj.value)

        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await asyncio.to_thread(self._password_service.hash, password)

        identity = await self._identity_repo.save(
            NewIdentity(email=email_obj, password_hash=password_hash),
        )

        logger.info("Identity registered: %s", identity.email)
        return IdentityDTO.from_identity(identity)
