"""In-process implementation of IdentityRepository."""

import asyncio
import logging
from dataclasses import replace
from typing import Optional, Union
from uuid import UUID, uuid4

from warden_auth.time import utc_now
from warden_identity.domain.identity import (
    Email,
    EmailAlreadyExistsError,
    Identity,
    IdentityRepository,
    NewIdentity,
)

logger = logging.getLogger(__name__)


class InMemoryIdentityRepository(IdentityRepository):
    """Dict-backed identity store keyed by id with an email index.

    Mutations run under an asyncio.Lock with no await inside the
    critical section, which makes ``save`` an atomic insert-if-absent.
    """

    def __init__(self) -> None:
        self._by_id: dict[UUID, Identity] = {}
        self._id_by_email: dict[str, UUID] = {}
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: Union[str, Email]) -> Optional[Identity]:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        identity_id = self._id_by_email.get(email_value)
        if identity_id is None:
            return None
        return self._by_id.get(identity_id)

    async def find_by_id(self, identity_id: UUID) -> Optional[Identity]:
        return self._by_id.get(identity_id)

    async def save(self, candidate: NewIdentity) -> Identity:
        email_value = candidate.email.value
        async with self._lock:
            if email_value in self._id_by_email:
                raise EmailAlreadyExistsError(email_value)
            identity = Identity(
                id=uuid4(),
                email=email_value,
                password_hash=candidate.password_hash,
                created_at=utc_now(),
            )
            self._by_id[identity.id] = identity
            self._id_by_email[email_value] = identity.id

        logger.info("Created identity: %s (email: %s)", identity.id, email_value)
        return identity

    async def update(self, identity: Identity) -> Optional[Identity]:
        identity = replace(identity, email=Email(identity.email).value)
        async with self._lock:
            existing = self._by_id.get(identity.id)
            if existing is None:
                return None
            if identity.email != existing.email:
                owner = self._id_by_email.get(identity.email)
                if owner is not None and owner != identity.id:
                    raise EmailAlreadyExistsError(identity.email)
                del self._id_by_email[existing.email]
                self._id_by_email[identity.email] = identity.id
            self._by_id[identity.id] = identity
        logger.debug("Updated identity: %s", identity.id)
        return identity

    async def delete(self, identity_id: UUID) -> bool:
        async with self._lock:
            identity = self._by_id.pop(identity_id, None)
            if identity is None:
                return False
            self._id_by_email.pop(identity.email, None)
        logger.info("Deleted identity: %s", identity_id)
        return True

    def __len__(self) -> int:
        return len(self._by_id)
